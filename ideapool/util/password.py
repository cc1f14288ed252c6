"""Password hashing utilities."""

from passlib.context import CryptContext

from ideapool.config import AuthSettings


class PasswordHasher:
    """Hashes and verifies passwords with passlib.

    The first configured scheme is used for new hashes. Hashes made with
    any other configured scheme still verify.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self._context = CryptContext(
            schemes=auth_settings.password_schemes, deprecated="auto"
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str | None) -> bool:
        if not password_hash:
            return False
        return self._context.verify(password, password_hash)
