"""Shared idea request and response models."""

from typing import Any

from pydantic import BaseModel

from ideapool.domain.model import Idea


class IdeaFields(BaseModel):
    """Client-supplied idea fields.

    Values are passed to the domain model untouched so its validation
    decides what is acceptable; no coercion happens here.
    """

    content: Any = None
    impact: Any = None
    ease: Any = None
    confidence: Any = None
    created_at: Any = None

    def to_fields(self) -> dict[str, Any]:
        fields = self.model_dump(include={"content", "impact", "ease", "confidence"})
        if self.created_at is not None:
            fields["created_at"] = self.created_at
        return fields


class IdeaResponse(BaseModel):
    """Idea as returned to clients."""

    id: str
    content: str | None
    impact: int | float | None
    ease: int | float | None
    confidence: int | float | None
    average_score: float
    created_at: int

    @classmethod
    def from_idea(cls, idea: Idea) -> "IdeaResponse":
        return cls(**idea.to_wire())
