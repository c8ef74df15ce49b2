"""WHERE 条件テンプレートとテンプレート適用."""

from __future__ import annotations

import re
from typing import Any

from sqlfield.exceptions import TemplateError

_DIRECTIVE = re.compile(r"%(.?)")


class SqlCondition:
    """WHERE 条件テンプレート.

    ``(カラム名, パラメータキー)`` の 2 スロットを ``%s`` で表す。
    """

    EQUAL = "%s=#{%s}"
    NOT_EQUAL = "%s&lt;&gt;#{%s}"
    LIKE = "%s LIKE CONCAT('%%',#{%s},'%%')"
    LIKE_LEFT = "%s LIKE CONCAT('%%',#{%s})"
    LIKE_RIGHT = "%s LIKE CONCAT(#{%s},'%%')"


def count_slots(template: str) -> int:
    """テンプレート内の ``%s`` スロット数を返す.

    Raises:
        TemplateError: ``%s`` / ``%%`` 以外の ``%`` 指定を含む場合

    """
    slots = 0
    for match in _DIRECTIVE.finditer(template):
        kind = match.group(1)
        if kind == "s":
            slots += 1
        elif kind != "%":
            msg = f"Unsupported directive '%{kind}' in template: {template!r}"
            raise TemplateError(msg)
    return slots


def apply_template(template: str, *args: Any) -> str:
    """テンプレートに引数を埋め込む.

    スロット数より引数が多い場合、余った引数は無視する。

    Examples:
        >>> apply_template("%s+1", "version")
        'version+1'
        >>> apply_template("now()", "updated_at")
        'now()'

    Raises:
        TemplateError: スロット数が引数より多い場合、または未対応の指定を含む場合

    """
    slots = count_slots(template)
    if slots > len(args):
        msg = f"Template {template!r} expects {slots} arguments, got {len(args)}"
        raise TemplateError(msg)
    return template % args[:slots]
