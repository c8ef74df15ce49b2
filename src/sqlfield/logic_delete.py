"""論理削除マーカーの解決."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlfield.config import DbConfig, LogicDeleteOptions


@dataclass(frozen=True)
class LogicDeleteMarkers:
    """論理削除の値の組."""

    delete_value: str | None = None
    not_delete_value: str | None = None

    @property
    def enabled(self) -> bool:
        """論理削除済みの値が設定されているか."""
        return bool(self.delete_value)


NO_MARKERS = LogicDeleteMarkers()


def resolve_logic_delete(
    db_config: DbConfig,
    override: LogicDeleteOptions | None,
) -> LogicDeleteMarkers:
    """フィールドの論理削除マーカーを解決する.

    グローバル設定に論理削除の値がなければ論理削除は行わない。
    個別設定の空の項目はグローバル設定の値で補う。

    Args:
        db_config: グローバル設定
        override: フィールドの論理削除設定. None は論理削除対象外を意味する。

    Returns:
        解決したマーカー. 対象外の場合は両方 None.

    """
    if db_config.logic_delete_value is None or override is None:
        return NO_MARKERS
    return LogicDeleteMarkers(
        delete_value=override.delval or db_config.logic_delete_value,
        not_delete_value=override.value or db_config.logic_not_delete_value,
    )
