"""Repository interfaces for Idea Pool domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ideapool.domain.repository.idea import IdeaRepository
from ideapool.domain.repository.user import UserRepository

__all__ = [
    "IdeaRepository",
    "UserRepository",
]
