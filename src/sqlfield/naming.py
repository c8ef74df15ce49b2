"""カラム名の命名規則変換."""

from __future__ import annotations


def camel_to_underline(name: str) -> str:
    """CamelCase → underline_case.

    先頭以外の大文字 (非 ASCII を含む) の前に ``_`` を挿入し、全体を小文字化する。
    変換済みの文字列に再適用しても結果は変わらない。

    Examples:
        >>> camel_to_underline("userName")
        'user_name'
        >>> camel_to_underline("user_name")
        'user_name'
        >>> camel_to_underline("nameÉtat")
        'name_état'

    """
    if not name or not name.strip():
        return ""
    return "".join(
        "_" + ch.lower() if i > 0 and ch.isupper() else ch.lower() for i, ch in enumerate(name)
    )


def to_upper_case(name: str) -> str:
    """識別子を大文字化する."""
    return name.upper()


def differs_ignoring_case(a: str, b: str) -> bool:
    """大文字小文字を無視して 2 つの識別子が異なるか判定する."""
    return a.casefold() != b.casefold()
