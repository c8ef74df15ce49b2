"""条件付き取り込みディレクティブ."""

from __future__ import annotations

from dataclasses import dataclass


def placeholder(key: str) -> str:
    """バインドパラメータ式 ``#{key}`` を返す."""
    return "#{" + key + "}"


def null_guard(prop: str) -> str:
    """``prop`` が null でないことを要求するガード式."""
    return f"{prop} != null"


def not_empty_guard(prop: str) -> str:
    """``prop`` が null でも空文字列でもないことを要求するガード式."""
    return f"{prop} != null and {prop} != ''"


@dataclass(frozen=True)
class GuardedFragment:
    """ガード式付きの SQL 断片.

    ガード式の評価と最終 SQL への展開はテンプレートエンジン側で行う。
    """

    body: str
    guard: str | None = None

    @property
    def is_conditional(self) -> bool:
        """ガード式を持つか."""
        return self.guard is not None

    def render(self) -> str:
        """``<if>`` ディレクティブ形式の文字列に変換する.

        Examples:
            >>> GuardedFragment("name,", "name != null").render()
            '<if test="name != null">name,</if>'
            >>> GuardedFragment("name,").render()
            'name,'

        """
        if self.guard is None:
            return self.body
        return f'<if test="{self.guard}">{self.body}</if>'
