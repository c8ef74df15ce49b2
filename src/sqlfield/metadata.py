"""フィールドメタデータ: 属性 1 つごとの SQL 断片生成用の情報."""

from __future__ import annotations

import logging
import types
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Annotated, Any, Union, get_args, get_origin

from sqlfield.condition import SqlCondition, count_slots
from sqlfield.exceptions import TemplateError
from sqlfield.logic_delete import resolve_logic_delete
from sqlfield.naming import camel_to_underline, differs_ignoring_case, to_upper_case
from sqlfield.strategy import FieldFill, FieldStrategy, resolve_strategy

if TYPE_CHECKING:
    from sqlfield.config import DbConfig, FieldOptions, LogicDeleteOptions
    from sqlfield.dialect import Dialect

logger = logging.getLogger(__name__)


def is_char_sequence(tp: Any) -> bool:
    """型が文字列データを表すか判定する.

    ``Annotated[str, ...]`` と ``str | None`` はアンラップして判定する。
    """
    if get_origin(tp) is Annotated:
        return is_char_sequence(get_args(tp)[0])
    if get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        return len(args) == 1 and is_char_sequence(args[0])
    if get_origin(tp) is not None:
        return False
    return isinstance(tp, type) and issubclass(tp, str)


@dataclass(frozen=True)
class FieldAttribute:
    """検出済みのエンティティ属性."""

    name: str
    type: Any
    owner: type | None = None
    options: FieldOptions | None = None
    logic_delete: LogicDeleteOptions | None = None


@dataclass
class TableContext:
    """フィールドを所有するテーブルの情報."""

    name: str
    under_camel: bool = True
    """カラム名を underline_case に変換するか."""

    logic_delete: bool = False
    """論理削除フィールドを持つか. 一度 True になると戻らない."""

    @classmethod
    def from_config(cls, name: str, db_config: DbConfig) -> TableContext:
        """グローバル設定の命名規則を引き継いで生成する."""
        return cls(name=name, under_camel=db_config.column_underline)

    def mark_logic_delete(self, flag: bool) -> None:
        """論理削除フラグを立てる (False では解除しない)."""
        if flag and not self.logic_delete:
            logger.debug("Table %s uses logical delete", self.name)
            self.logic_delete = True


@dataclass(frozen=True)
class FieldDescriptor:
    """データベースのカラムに対応する属性のメタデータ.

    Raises:
        TemplateError: condition が 2 スロットでない、または update が 2 スロット以上の場合

    """

    property: str
    property_type: Any
    column: str
    el: str
    strategy: FieldStrategy
    condition: str = SqlCondition.EQUAL
    fill: FieldFill = FieldFill.DEFAULT
    update: str = ""
    select: bool = True
    logic_delete_value: str | None = None
    logic_not_delete_value: str | None = None
    owner: type | None = None
    is_char_sequence: bool = field(init=False)
    related: bool = field(init=False)
    _select_cache: dict[Dialect, str] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if count_slots(self.condition) != 2:
            msg = f"Condition template must have exactly 2 slots: {self.condition!r}"
            raise TemplateError(msg)
        if self.update and count_slots(self.update) > 1:
            msg = f"Update template must have at most 1 slot: {self.update!r}"
            raise TemplateError(msg)
        object.__setattr__(self, "is_char_sequence", is_char_sequence(self.property_type))
        object.__setattr__(self, "related", differs_ignoring_case(self.property, self.column))

    @property
    def is_logic_delete(self) -> bool:
        """論理削除フィールドか."""
        return bool(self.logic_delete_value)

    @classmethod
    def from_attribute(
        cls,
        db_config: DbConfig,
        table: TableContext,
        attribute: FieldAttribute,
    ) -> FieldDescriptor:
        """検出済み属性からメタデータを構築する.

        個別設定 (``attribute.options``) の有無で解決規則が異なる。
        テーブルの論理削除フラグは変更しない (``build_field_descriptors`` を参照)。

        Args:
            db_config: グローバル設定
            table: 所有テーブル
            attribute: 検出済み属性

        Returns:
            構築したメタデータ

        """
        prop = attribute.name
        options = attribute.options
        markers = resolve_logic_delete(db_config, attribute.logic_delete)
        text = is_char_sequence(attribute.type)

        if options is None:
            column = camel_to_underline(prop) if table.under_camel else prop
            if db_config.capital_mode:
                column = to_upper_case(column)
            descriptor = cls(
                property=prop,
                property_type=attribute.type,
                column=column,
                el=prop,
                strategy=db_config.field_strategy,
                condition=_default_condition(db_config, text),
                logic_delete_value=markers.delete_value,
                logic_not_delete_value=markers.not_delete_value,
                owner=attribute.owner,
            )
        else:
            if options.column:
                column = options.column
            elif table.under_camel:
                column = camel_to_underline(prop)
            else:
                column = prop
            descriptor = cls(
                property=prop,
                property_type=attribute.type,
                column=column,
                el=options.el or prop,
                strategy=resolve_strategy(db_config.field_strategy, options.strategy),
                condition=options.condition or _default_condition(db_config, text),
                fill=options.fill,
                update=options.update,
                select=options.select,
                logic_delete_value=markers.delete_value,
                logic_not_delete_value=markers.not_delete_value,
                owner=attribute.owner,
            )

        logger.debug(
            "Resolved field %s.%s: column=%s strategy=%s condition=%r",
            table.name,
            prop,
            descriptor.column,
            descriptor.strategy.name,
            descriptor.condition,
        )
        return descriptor


def _default_condition(db_config: DbConfig, text: bool) -> str:
    """グローバル設定による WHERE 条件 (文字列カラムの LIKE 化)."""
    if db_config.column_like and text:
        return db_config.db_type.like_condition
    return SqlCondition.EQUAL


def build_field_descriptors(
    db_config: DbConfig,
    table: TableContext,
    attributes: Iterable[FieldAttribute],
) -> list[FieldDescriptor]:
    """属性ごとのメタデータを構築し、テーブルの論理削除フラグを更新する.

    いずれかのフィールドが論理削除対象ならテーブルのフラグを立てる。
    既に立っているフラグは解除しない。

    Args:
        db_config: グローバル設定
        table: 所有テーブル
        attributes: 検出済み属性 (定義順)

    Returns:
        メタデータのリスト (属性と同じ順序)

    """
    descriptors = [
        FieldDescriptor.from_attribute(db_config, table, attribute) for attribute in attributes
    ]
    table.mark_logic_delete(any(d.is_logic_delete for d in descriptors))
    return descriptors
