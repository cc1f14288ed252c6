"""In-memory repository implementations for testing."""

from .idea import InMemoryIdeaRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryIdeaRepository",
    "InMemoryUserRepository",
]
