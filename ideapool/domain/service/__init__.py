"""Domain services."""

from .base import Service
from .idea_service import IdeaService
from .ranking_service import RankingService
from .token_manager import TokenManagerService
from .user_service import UserService

__all__ = [
    "IdeaService",
    "RankingService",
    "Service",
    "TokenManagerService",
    "UserService",
]
