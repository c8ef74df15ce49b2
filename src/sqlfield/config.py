"""設定スナップショット: グローバル設定とフィールド個別設定."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from sqlfield.condition import count_slots
from sqlfield.dialect import Dialect
from sqlfield.exceptions import TemplateError
from sqlfield.strategy import FieldFill, FieldStrategy


class DbConfig(BaseModel):
    """DB 関連のグローバル設定.

    読み込みと検証は呼び出し側の責務。本モデルは検証済みの値を保持する
    不変スナップショットとして扱う。

    Examples:
        >>> config = DbConfig.model_validate({"db_type": "postgresql", "column_like": True})
        >>> config.db_type
        <Dialect.POSTGRESQL: ('postgresql', '"%s"')>

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    db_type: Dialect = Dialect.MYSQL
    """RDBMS 方言. LIKE 条件テンプレートの選択に使用する."""

    field_strategy: FieldStrategy = FieldStrategy.NOT_NULL
    """既定のフィールド戦略."""

    column_underline: bool = True
    """カラム名を underline_case に変換するか."""

    capital_mode: bool = False
    """カラム名を大文字にするか."""

    column_like: bool = False
    """文字列フィールドの WHERE 条件を LIKE にするか."""

    logic_delete_value: str | None = None
    """論理削除済みを表す値. None の場合は論理削除を行わない."""

    logic_not_delete_value: str | None = None
    """論理未削除を表す値."""

    @field_validator("db_type", mode="before")
    @classmethod
    def _parse_db_type(cls, value: object) -> object:
        if isinstance(value, str):
            return Dialect.from_id(value)
        return value


class FieldOptions(BaseModel):
    """フィールド個別の設定.

    空文字列の項目は「未指定」を意味し、グローバル設定にフォールバックする。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    column: str = ""
    """カラム名."""

    el: str = ""
    """バインド式のキー (例: ``"name,jdbcType=VARCHAR"``)."""

    select: bool = True
    """SELECT 対象に含めるか."""

    fill: FieldFill = FieldFill.DEFAULT
    """自動補完のタイミング."""

    strategy: FieldStrategy | None = None
    """フィールド戦略. None はグローバル既定値を使用する."""

    condition: str = ""
    """WHERE 条件テンプレート (2 スロット)."""

    update: str = ""
    """UPDATE SET 式テンプレート (カラム名の 1 スロットまで)."""

    @field_validator("condition")
    @classmethod
    def _check_condition(cls, value: str) -> str:
        if value and count_slots(value) != 2:
            msg = f"Condition template must have exactly 2 slots: {value!r}"
            raise TemplateError(msg)
        return value

    @field_validator("update")
    @classmethod
    def _check_update(cls, value: str) -> str:
        if value and count_slots(value) > 1:
            msg = f"Update template must have at most 1 slot: {value!r}"
            raise TemplateError(msg)
        return value


class LogicDeleteOptions(BaseModel):
    """論理削除フィールドの個別設定.

    空文字列の項目はグローバル設定の値を使用する。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str = ""
    """論理未削除を表す値."""

    delval: str = ""
    """論理削除済みを表す値."""
