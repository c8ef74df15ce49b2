"""フィールド戦略と自動補完 (fill) 方針."""

from __future__ import annotations

from enum import Enum


class FieldStrategy(Enum):
    """INSERT/UPDATE 時にフィールドを条件付きで含めるかの戦略."""

    DEFAULT = "default"
    NOT_NULL = "not_null"
    NOT_EMPTY = "not_empty"
    IGNORED = "ignored"


class FieldFill(Enum):
    """外部の仕組みで値が補完されるタイミング.

    補完対象の文では、戦略によるガードを付けずにフィールドを常に含める。
    """

    DEFAULT = "default"
    INSERT = "insert"
    UPDATE = "update"
    INSERT_UPDATE = "insert_update"

    @property
    def on_insert(self) -> bool:
        """INSERT 時に補完されるか."""
        return self in (FieldFill.INSERT, FieldFill.INSERT_UPDATE)

    @property
    def on_update(self) -> bool:
        """UPDATE 時に補完されるか."""
        return self in (FieldFill.UPDATE, FieldFill.INSERT_UPDATE)


def resolve_strategy(
    default: FieldStrategy,
    override: FieldStrategy | None = None,
) -> FieldStrategy:
    """有効なフィールド戦略を決定する.

    個別指定があればそれを優先し、なければグローバル既定値を使用する。

    Args:
        default: グローバル既定の戦略
        override: フィールド個別の戦略。None は未指定を意味する。

    Returns:
        有効な戦略

    """
    if override is not None:
        return override
    return default
