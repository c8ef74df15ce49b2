"""Dialect enum: RDBMS ごとの SQL 方言定義."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from sqlfield.exceptions import UnknownDialectError


@runtime_checkable
class IdentifierQuoter(Protocol):
    """識別子のクォート処理のインターフェース."""

    def quote_identifier(self, name: str) -> str:
        """識別子をクォートする."""
        ...


class Dialect(Enum):
    """RDBMS ごとの SQL 方言.

    MYSQL と MARIADB は同じクォート形式と LIKE 条件を使用するが、
    方言 ID が異なるため別メンバーとして定義する。
    """

    MYSQL = ("mysql", "`%s`")
    MARIADB = ("mariadb", "`%s`")
    POSTGRESQL = ("postgresql", '"%s"')
    SQLITE = ("sqlite", '"%s"')
    ORACLE = ("oracle", '"%s"')
    SQLSERVER = ("sqlserver", "[%s]")

    def __init__(self, dialect_id: str, quote_fmt: str) -> None:
        self._dialect_id = dialect_id
        self._quote_fmt = quote_fmt

    @classmethod
    def from_id(cls, dialect_id: str) -> Dialect:
        """方言 ID (大文字小文字を区別しない) から Dialect を取得する.

        Raises:
            UnknownDialectError: 該当する方言がない場合

        """
        key = dialect_id.strip().lower()
        for dialect in cls:
            if dialect._dialect_id == key:
                return dialect
        msg = f"Unknown dialect: {dialect_id!r}"
        raise UnknownDialectError(msg)

    @property
    def dialect_id(self) -> str:
        """方言 ID を返す."""
        return self._dialect_id

    def quote_identifier(self, name: str) -> str:
        """識別子を方言固有の形式でクォートする."""
        return self._quote_fmt % name

    @property
    def like_condition(self) -> str:
        """部分一致 LIKE 条件テンプレートを返す.

        ``(カラム名, パラメータキー)`` の 2 スロットを持つ。
        文字列連結の構文が RDBMS ごとに異なる。

        Returns:
            LIKE 条件テンプレート
        """
        match self:
            case Dialect.SQLITE:
                return "%s LIKE '%%'||#{%s}||'%%'"
            case Dialect.ORACLE:
                return "%s LIKE CONCAT(CONCAT('%%',#{%s}),'%%')"
            case Dialect.SQLSERVER:
                return "%s LIKE '%%'+#{%s}+'%%'"
            case _:
                return "%s LIKE CONCAT('%%',#{%s},'%%')"
