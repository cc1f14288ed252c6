"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from ideapool.domain.model import Idea, User
from ideapool.domain.value import IdeaId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _metric(value: Any) -> int | float | None:
    # Float columns hand back 8.0 for a stored 8
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        name=row["name"],
        password=row["password"],
        avatar_url=row.get("avatar_url"),
        access_token=row.get("access_token"),
        refresh_token=row.get("refresh_token"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_idea(row: Dict[str, Any]) -> Idea:
    """Convert database row to Idea domain model.

    The stored ``average_score`` is not read back; the model derives it.

    Args:
        row: Database row as dict

    Returns:
        Idea domain model
    """
    return Idea(
        id=IdeaId(_uuid(row["id"])),
        content=row.get("content"),
        impact=_metric(row.get("impact")),
        ease=_metric(row.get("ease")),
        confidence=_metric(row.get("confidence")),
        created_at=row["created_at"],
    )


def idea_to_dict(user_id: UserId, idea: Idea) -> Dict[str, Any]:
    """Convert Idea domain model to database dict.

    Args:
        user_id: Owner of the idea
        idea: Idea domain model

    Returns:
        Dict suitable for database insertion/update, without ``id`` when
        the idea has none yet
    """
    values = idea.model_dump(exclude_none=False)
    values["user_id"] = user_id
    if values.get("id") is None:
        values.pop("id", None)
    return values
