"""Codeforces problemset API client and wire models."""
from .client import CodeforcesClient
from .errors import DecodeError, FetchError, UpstreamError
from .models import Problem, ProblemsetEnvelope

__all__ = [
    "CodeforcesClient",
    "DecodeError",
    "FetchError",
    "UpstreamError",
    "Problem",
    "ProblemsetEnvelope",
]
