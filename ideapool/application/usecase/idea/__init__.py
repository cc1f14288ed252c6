"""Idea use cases."""

from .create_idea import CreateIdeaUseCase
from .delete_idea import DeleteIdeaUseCase
from .get_idea import GetIdeaUseCase
from .list_ideas import ListIdeasUseCase
from .update_idea import UpdateIdeaUseCase

__all__ = [
    "CreateIdeaUseCase",
    "DeleteIdeaUseCase",
    "GetIdeaUseCase",
    "ListIdeasUseCase",
    "UpdateIdeaUseCase",
]
