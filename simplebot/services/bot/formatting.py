"""Small text helpers shared by the reply builders."""

from collections.abc import Callable, Sequence
from typing import TypeVar

from simplebot.services.bot.constants import ELLIPSIS

T = TypeVar("T")


def plural(count: int, singular: str, plural_form: str) -> str:
    return singular if count == 1 else plural_form


def limited_lines(items: Sequence[T], limit: int, render: Callable[[T], str]) -> list[str]:
    """Render up to `limit` items, followed by an ellipsis line if some were left out."""
    lines = [render(item) for item in items[:limit]]
    if len(items) > limit:
        lines.append(ELLIPSIS)
    return lines
