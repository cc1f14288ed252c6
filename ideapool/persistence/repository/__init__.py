"""PostgreSQL repository implementations."""

from ideapool.persistence.repository.idea import PostgresIdeaRepository
from ideapool.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresIdeaRepository",
    "PostgresUserRepository",
]
