"""sqlfield: per-field SQL fragment metadata for dynamic statements."""

from sqlfield.composer import (
    insert_column_fragment,
    insert_value_fragment,
    select_fragment,
    update_set_fragment,
    where_fragment,
)
from sqlfield.condition import SqlCondition
from sqlfield.config import DbConfig, FieldOptions, LogicDeleteOptions
from sqlfield.dialect import Dialect, IdentifierQuoter
from sqlfield.exceptions import SqlfieldError, TemplateError, UnknownDialectError
from sqlfield.metadata import FieldAttribute, FieldDescriptor, TableContext, build_field_descriptors
from sqlfield.script import GuardedFragment
from sqlfield.strategy import FieldFill, FieldStrategy

__all__ = [
    "DbConfig",
    "Dialect",
    "FieldAttribute",
    "FieldDescriptor",
    "FieldFill",
    "FieldOptions",
    "FieldStrategy",
    "GuardedFragment",
    "IdentifierQuoter",
    "LogicDeleteOptions",
    "SqlCondition",
    "SqlfieldError",
    "TableContext",
    "TemplateError",
    "UnknownDialectError",
    "build_field_descriptors",
    "insert_column_fragment",
    "insert_value_fragment",
    "select_fragment",
    "update_set_fragment",
    "where_fragment",
]
