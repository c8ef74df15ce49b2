"""フィールドメタデータから SELECT/INSERT/UPDATE/WHERE の SQL 断片を生成する.

すべての関数は副作用を持たない (SELECT 断片のキャッシュを除く)。
INSERT/UPDATE の断片はフィールド戦略に応じたガード式で包まれ、
自動補完 (fill) 対象の場合はガードなしで常に含まれる。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlfield.condition import apply_template
from sqlfield.dialect import Dialect
from sqlfield.script import GuardedFragment, not_empty_guard, null_guard, placeholder
from sqlfield.strategy import FieldStrategy

if TYPE_CHECKING:
    from sqlfield.dialect import IdentifierQuoter
    from sqlfield.metadata import FieldDescriptor


def select_fragment(field: FieldDescriptor, quoter: IdentifierQuoter) -> str:
    """SELECT 句の断片を返す.

    カラム名とプロパティ名が異なる場合は ``AS`` で別名を付ける。
    quoter が Dialect の場合のみ結果をキャッシュし、それ以外は毎回計算する。

    Args:
        field: フィールドメタデータ
        quoter: 識別子のクォート処理 (通常は Dialect)

    Returns:
        SELECT 句の断片

    Examples:
        >>> select_fragment(user_name_field, Dialect.MYSQL)
        '`user_name` AS `userName`'

    """
    if not isinstance(quoter, Dialect):
        return _build_select(field, quoter)
    cached = field._select_cache.get(quoter)
    if cached is not None:
        return cached
    return field._select_cache.setdefault(quoter, _build_select(field, quoter))


def _build_select(field: FieldDescriptor, quoter: IdentifierQuoter) -> str:
    sql = quoter.quote_identifier(field.column)
    if field.related:
        sql += " AS " + quoter.quote_identifier(field.property)
    return sql


def insert_column_fragment(field: FieldDescriptor) -> GuardedFragment:
    """INSERT 文のカラム部分 ``insert into t (ここ) values (...)`` の断片."""
    body = field.column + ","
    if field.fill.on_insert:
        return GuardedFragment(body)
    return GuardedFragment(body, _guard(field, field.property))


def insert_value_fragment(field: FieldDescriptor) -> GuardedFragment:
    """INSERT 文の値部分 ``insert into t (...) values (ここ)`` の断片.

    カラム部分と同じガード式を使うため、両者の並びは常に一致する。
    """
    body = placeholder(field.el) + ","
    if field.fill.on_insert:
        return GuardedFragment(body)
    return GuardedFragment(body, _guard(field, field.property))


def update_set_fragment(field: FieldDescriptor, prefix: str | None = "") -> GuardedFragment:
    """UPDATE 文の SET 句の断片 ``column=#{prefix.el},``.

    ``update`` テンプレートがあればカラム名を埋め込んだ式を値とする。

    Args:
        field: フィールドメタデータ
        prefix: パラメータ名の接頭辞 (例: ``"et."``)

    Returns:
        SET 句の断片

    """
    prefix = prefix or ""
    if field.update:
        expr = apply_template(field.update, field.column)
    else:
        expr = placeholder(prefix + field.el)
    body = f"{field.column}={expr},"
    if field.fill.on_update:
        return GuardedFragment(body)
    return GuardedFragment(body, _guard(field, prefix + field.property))


def where_fragment(field: FieldDescriptor, prefix: str | None = "") -> GuardedFragment:
    """WHERE 句の断片 `` AND column=#{prefix.el}``.

    戦略に関係なく null 判定のみのガードを付ける。
    """
    prefix = prefix or ""
    body = " AND " + apply_template(field.condition, field.column, prefix + field.el)
    return GuardedFragment(body, null_guard(prefix + field.property))


def _guard(field: FieldDescriptor, prop: str) -> str | None:
    if field.strategy is FieldStrategy.IGNORED:
        return None
    if field.strategy is FieldStrategy.NOT_EMPTY and field.is_char_sequence:
        return not_empty_guard(prop)
    return null_guard(prop)
