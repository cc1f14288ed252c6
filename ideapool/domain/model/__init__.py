"""Domain model entities for Idea Pool."""

from ideapool.domain.model.idea import Idea
from ideapool.domain.model.user import User

__all__ = [
    "Idea",
    "User",
]
