from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError


class AuthService:
    """Static credential gate for the single admin account.

    The configured password is only kept as a hash.
    """

    def __init__(self, *, username: str, password: str):
        self._username = username
        self._password_hash = generate_password_hash(password)

    def authenticate(self, username: str, password: str) -> str:
        if (username or "").strip() != self._username or not check_password_hash(self._password_hash, password or ""):
            raise AuthenticationError("Invalid username or password.")
        return self._username
