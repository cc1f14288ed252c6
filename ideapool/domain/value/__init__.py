"""Domain value objects for Idea Pool."""

from ideapool.domain.value.identifiers import IdeaId, UserId
from ideapool.domain.value.paging import IdeaPageQuery
from ideapool.domain.value.types import MetricName, TokenPair

__all__ = [
    # Identifiers
    "UserId",
    "IdeaId",
    # Types
    "IdeaPageQuery",
    "MetricName",
    "TokenPair",
]
