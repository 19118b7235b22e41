from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class ReviewType(str, Enum):
    REVIEW = "review"
    ERRORS = "errors"
    IMPROVEMENTS = "improvements"
    REFACTOR = "refactor"

    @classmethod
    def is_known(cls, value) -> bool:
        return isinstance(value, str) and value in cls._value2member_map_

    @classmethod
    def resolve(cls, value) -> "ReviewType":
        """Map a raw review type to a member, falling back to REVIEW for unknown values."""
        if isinstance(value, cls):
            return value
        if cls.is_known(value):
            return cls(value)
        return cls.REVIEW


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-18T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AnalysisRequest(BaseModel):
    code: str = Field(..., min_length=1, description="The source code to be analyzed.")
    reviewType: ReviewType = Field(..., description="Which review prompt to use.")


class AnalysisResult(BaseModel):
    analysis: str = Field(..., description="Text returned by the LLM provider.")
    reviewType: str = Field(..., description="The review type echoed from the request.")
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorResponse(BaseModel):
    error: str
