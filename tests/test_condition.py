"""WHERE 条件テンプレートのテスト."""

from __future__ import annotations

import pytest

from sqlfield.condition import SqlCondition, apply_template, count_slots
from sqlfield.exceptions import TemplateError


class TestCountSlots:
    """count_slots のスロット数."""

    def test_equal(self) -> None:
        assert count_slots(SqlCondition.EQUAL) == 2

    def test_like_ignores_escaped_percent(self) -> None:
        """%% はスロットとして数えない."""
        assert count_slots(SqlCondition.LIKE) == 2

    def test_no_slot(self) -> None:
        assert count_slots("now()") == 0

    @pytest.mark.parametrize("template", ["%d=#{%s}", "%s LIKE 100%"])
    def test_unsupported_directive(self, template: str) -> None:
        """%s / %% 以外の % 指定はエラー."""
        with pytest.raises(TemplateError):
            count_slots(template)


class TestApplyTemplate:
    """apply_template の埋め込み."""

    def test_equal(self) -> None:
        assert apply_template(SqlCondition.EQUAL, "name", "name") == "name=#{name}"

    def test_like_renders_percent(self) -> None:
        """%% は % として出力される."""
        sql = apply_template(SqlCondition.LIKE, "name", "ew.name")
        assert sql == "name LIKE CONCAT('%',#{ew.name},'%')"

    def test_extra_arguments_ignored(self) -> None:
        """スロットより多い引数は無視する."""
        assert apply_template("now()", "updated_at") == "now()"
        assert apply_template("%s+1", "version", "unused") == "version+1"

    def test_missing_arguments(self) -> None:
        """引数が足りない場合はエラー."""
        with pytest.raises(TemplateError):
            apply_template(SqlCondition.EQUAL, "name")
