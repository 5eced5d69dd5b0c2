"""Sorting and tag filtering applied to upstream problem lists."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ..upstream.models import Problem


def sort_by_rating(problems: Iterable[Problem]) -> list[Problem]:
    """Order by rating ascending; equal ratings keep upstream order."""
    return sorted(problems, key=lambda p: p.rating)


def filter_exact(problems: Iterable[Problem], tag_count: int) -> list[Problem]:
    """Keep problems carrying exactly ``tag_count`` tags.

    Only the number of tags is compared, not which tags they are. A problem
    with ``tag_count`` unrelated tags is kept as well.
    """
    return [p for p in problems if len(p.tags) == tag_count]


def split_tags(raw: str) -> list[str]:
    # No trimming: "" -> [""] and "dp," -> ["dp", ""], as clients have always seen it
    return raw.split(",")
