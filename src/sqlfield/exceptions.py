"""sqlfield 例外クラス."""


class SqlfieldError(Exception):
    """sqlfield の基底例外."""


class TemplateError(SqlfieldError, ValueError):
    """SQL テンプレートの書式エラー."""


class UnknownDialectError(SqlfieldError, ValueError):
    """未知の RDBMS 方言."""
