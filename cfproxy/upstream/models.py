"""Data models for the Codeforces problemset API."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Problem(BaseModel):
    """A problem as returned by ``problemset.problems``."""
    model_config = ConfigDict(populate_by_name=True)

    contest_id: Optional[int] = Field(default=None, alias="contestId")
    problemset_name: str = Field(default="", alias="problemsetName")
    index: str
    name: str
    type: str
    points: Optional[float] = None
    rating: int = 0  # unrated problems sort first
    tags: list[str] = []


class ProblemsetResult(BaseModel):
    problems: list[Problem] = []


class ProblemsetEnvelope(BaseModel):
    """Response wrapper: ``{"status": ..., "result": {"problems": [...]}}``."""
    status: str
    comment: Optional[str] = None
    result: ProblemsetResult = ProblemsetResult()
