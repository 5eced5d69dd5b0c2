"""Rating sort, exact-match filtering and query composition."""
from .query import MatchMode, ProblemQuery, apply_mode, run_query
from .rules import filter_exact, sort_by_rating, split_tags

__all__ = [
    "MatchMode",
    "ProblemQuery",
    "apply_mode",
    "run_query",
    "filter_exact",
    "sort_by_rating",
    "split_tags",
]
