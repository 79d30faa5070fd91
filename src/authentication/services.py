"""Token service for JWT issuance, verification, and header extraction."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings


class AuthError(Exception):
    """Base class for bearer-token failures (mapped to 401)."""


class InvalidTokenError(AuthError):
    """Token signature, structure, or expiry check failed."""


class AuthHeaderError(AuthError):
    """Authorization header is present but not ``<scheme> <token>``."""


@dataclass(frozen=True)
class AuthData:
    """Claims carried by a bearer token."""

    login: str

    # Lets DRF and permission classes treat the claims as an authenticated user.
    is_authenticated = True


class TokenService:
    """Issue and verify signed bearer tokens for a login."""

    ALGORITHM = "HS256"
    DEFAULT_TTL = timedelta(minutes=30)

    def __init__(self, secret_key: str, ttl: timedelta = DEFAULT_TTL, scheme: str = "Token"):
        self._secret_key = secret_key
        self.ttl = ttl
        self.scheme = scheme

    def issue_token(self, data: AuthData) -> str:
        """Return a signed token for ``data`` that expires after ``ttl``."""

        now = datetime.now(timezone.utc)
        payload = {
            "user": {"login": data.login},
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def parse_token(self, token: str) -> AuthData:
        """Verify signature and expiry, then return the embedded claims."""

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid token") from exc

        return AuthData(login=self._login_claim(payload))

    def token_from_header(self, header: str | None) -> str | None:
        """Extract the token from ``"<scheme> <token>"``; ``None`` when absent."""

        if not header:
            return None
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != self.scheme.lower():
            raise AuthHeaderError(f"Authorization header format must be {self.scheme!r} <token>")
        return parts[1]

    @staticmethod
    def _login_claim(payload: dict[str, Any]) -> str:
        user = payload.get("user")
        login = user.get("login") if isinstance(user, dict) else None
        if not isinstance(login, str) or not login:
            raise InvalidTokenError("Token does not carry a login")
        return login


_service: TokenService | None = None


def get_token_service() -> TokenService:
    """Return the process-wide token service configured from settings."""

    global _service
    if _service is None:
        _service = TokenService(
            settings.SECRET_KEY,
            ttl=timedelta(minutes=settings.AUTH_TOKEN_TTL_MINUTES),
            scheme=settings.AUTH_HEADER_SCHEME,
        )
    return _service


__all__ = [
    "AuthData",
    "AuthError",
    "AuthHeaderError",
    "InvalidTokenError",
    "TokenService",
    "get_token_service",
]
