"""Configuration provider.

``Settings`` is read from the environment once per container. Services
depend on the section they need rather than on the whole ``Settings``.
"""

from dishka import Scope, provide

from ideapool.config import (
    APISettings,
    AuthSettings,
    DatabaseSettings,
    PaginationSettings,
    Settings,
)
from ideapool.util.di.base import ProviderBase
from ideapool.util.password import PasswordHasher


class ProdConfigProvider(ProviderBase):
    """Settings sections and the stateless helpers built from them."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_api_settings(self, settings: Settings) -> APISettings:
        return settings.api

    @provide
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination

    @provide
    def provide_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Hasher shared by all requests; building the passlib context is slow."""
        return PasswordHasher(auth_settings)
