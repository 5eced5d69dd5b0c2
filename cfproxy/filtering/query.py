"""Query descriptors and the fetch -> sort -> filter pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .rules import filter_exact, split_tags

if TYPE_CHECKING:
    from ..upstream.client import CodeforcesClient
    from ..upstream.models import Problem


class MatchMode(str, Enum):
    ANY = "any"
    EXACT = "exact"


@dataclass(frozen=True)
class ProblemQuery:
    tags: tuple[str, ...]
    mode: MatchMode = MatchMode.ANY
    multi: bool = False

    @classmethod
    def single(cls, tag: str, exact: bool = False) -> ProblemQuery:
        return cls((tag,), MatchMode.EXACT if exact else MatchMode.ANY, multi=False)

    @classmethod
    def multi_from_param(cls, raw: str, exact: bool = False) -> ProblemQuery:
        """Build from a comma-separated ``tags`` query parameter."""
        mode = MatchMode.EXACT if exact else MatchMode.ANY
        return cls(tuple(split_tags(raw)), mode, multi=True)


def apply_mode(problems: list[Problem], query: ProblemQuery) -> list[Problem]:
    if query.mode is MatchMode.EXACT:
        return filter_exact(problems, len(query.tags))
    return problems


async def run_query(client: CodeforcesClient, query: ProblemQuery) -> list[Problem]:
    """Fetch (already rating-sorted), then apply the match mode."""
    if query.multi:
        problems = await client.fetch_by_tags(query.tags)
    else:
        problems = await client.fetch_by_tag(query.tags[0])
    return apply_mode(problems, query)
