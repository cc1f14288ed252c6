"""Idea entity.

An idea is a short piece of content scored on impact, ease and
confidence. Its average score is derived from the three metrics on every
read and is never stored as authoritative state.
"""

import time
from typing import Any, Optional

from pydantic import Field, ValidationInfo, computed_field, field_validator

from ideapool.domain.model.common import DomainModel
from ideapool.domain.value import IdeaId, MetricName
from ideapool.domain.value.types import (
    validate_content,
    validate_created_at,
    validate_metric,
)

SCORE_PRECISION = 15


def _now_epoch_seconds() -> int:
    return int(time.time())


class Idea(DomainModel):
    """A scored idea owned by a single user.

    The owner is not part of the model: repositories partition ideas by
    user id and every repository call names the partition explicitly.
    """

    id: Optional[IdeaId] = None
    content: Optional[str] = None
    impact: Optional[int | float] = None
    ease: Optional[int | float] = None
    confidence: Optional[int | float] = None
    created_at: int = Field(default_factory=_now_epoch_seconds)

    @field_validator("content", mode="before")
    @classmethod
    def check_content(cls, v: Any) -> Any:
        return v if v is None else validate_content(v)

    @field_validator("impact", "ease", "confidence", mode="before")
    @classmethod
    def check_metric(cls, v: Any, info: ValidationInfo) -> Any:
        return v if v is None else validate_metric(info.field_name, v)

    @field_validator("created_at", mode="before")
    @classmethod
    def check_created_at(cls, v: Any) -> Any:
        return validate_created_at(v)

    @computed_field
    @property
    def average_score(self) -> float:
        """Mean of the three metrics, unset metrics counting as 0."""
        total = (self.impact or 0) + (self.ease or 0) + (self.confidence or 0)
        return round(total / 3, SCORE_PRECISION)

    def with_id(self, idea_id: IdeaId) -> "Idea":
        return self.model_copy(update={"id": idea_id})

    def with_content(self, value: Any) -> "Idea":
        return self.model_copy(update={"content": validate_content(value)})

    def with_metric(self, name: MetricName | str, value: Any) -> "Idea":
        """Set one metric.

        Raises:
            ValueError: If ``name`` is not a metric
            ModelValidationError: If the value is not an allowed score
        """
        metric = MetricName(name)
        return self.model_copy(
            update={metric.value: validate_metric(metric.value, value)}
        )

    def with_created_at(self, value: Any) -> "Idea":
        return self.model_copy(update={"created_at": validate_created_at(value)})

    def to_wire(self) -> dict[str, Any]:
        """Shape returned to API clients."""
        wire: dict[str, Any] = {
            "id": str(self.id) if self.id is not None else None,
            "content": self.content,
            "impact": self.impact,
            "ease": self.ease,
            "confidence": self.confidence,
            "average_score": self.average_score,
            "created_at": self.created_at,
        }
        if self.id is None:
            del wire["id"]
        return wire
