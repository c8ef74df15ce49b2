"""pytest 共通設定: フィールドメタデータの fixture."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from sqlfield.config import DbConfig, FieldOptions, LogicDeleteOptions
from sqlfield.metadata import FieldAttribute, FieldDescriptor, TableContext


@pytest.fixture
def db_config() -> DbConfig:
    """既定のグローバル設定."""
    return DbConfig()


@pytest.fixture
def table() -> TableContext:
    """underline_case 変換ありのテーブル."""
    return TableContext(name="user")


@pytest.fixture
def make_field(
    db_config: DbConfig, table: TableContext
) -> Callable[..., FieldDescriptor]:
    """属性名・型・個別設定から FieldDescriptor を生成するファクトリ."""

    def factory(
        name: str = "userName",
        tp: Any = str,
        options: FieldOptions | None = None,
        logic_delete: LogicDeleteOptions | None = None,
        *,
        config: DbConfig | None = None,
    ) -> FieldDescriptor:
        attribute = FieldAttribute(
            name=name, type=tp, options=options, logic_delete=logic_delete
        )
        return FieldDescriptor.from_attribute(config or db_config, table, attribute)

    return factory
