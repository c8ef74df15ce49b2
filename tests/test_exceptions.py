"""例外クラスのテスト."""

import pytest

from sqlfield.exceptions import SqlfieldError, TemplateError, UnknownDialectError


class TestExceptionHierarchy:
    """例外クラスの継承関係を検証する."""

    def test_sqlfield_error_is_exception(self) -> None:
        assert issubclass(SqlfieldError, Exception)

    def test_template_error_is_sqlfield_error(self) -> None:
        assert issubclass(TemplateError, SqlfieldError)

    def test_template_error_is_value_error(self) -> None:
        assert issubclass(TemplateError, ValueError)

    def test_unknown_dialect_error_is_sqlfield_error(self) -> None:
        assert issubclass(UnknownDialectError, SqlfieldError)


class TestExceptionCatch:
    """基底例外で子例外をキャッチできることを検証する."""

    def test_catch_template_error_as_sqlfield_error(self) -> None:
        with pytest.raises(SqlfieldError):
            raise TemplateError("bad template")

    def test_catch_unknown_dialect_error_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise UnknownDialectError("unknown")


class TestExceptionMessage:
    """例外メッセージが保持されることを検証する."""

    def test_template_error_message(self) -> None:
        err = TemplateError("bad template")
        assert str(err) == "bad template"
