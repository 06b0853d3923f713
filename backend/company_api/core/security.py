from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any
import jwt
from passlib.context import CryptContext

from company_api.core.config import settings

# Prefer argon2, keep bcrypt so digests written by older deployments still verify
pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")

USER_ID_CLAIM = "user_id"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed or unknown digest format
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


class TokenManager:
    """Issues and verifies HMAC signed access tokens bound to a user id."""

    def __init__(self, signing_key: str, token_ttl: timedelta, algorithm: str = "HS256"):
        if not signing_key:
            raise ValueError("empty signing key passed")
        self._signing_key = signing_key
        self.token_ttl = token_ttl
        self.algorithm = algorithm

    def issue(self, user_id: str) -> tuple[str, datetime]:
        """Return a signed token for ``user_id`` and the expiry stored in it."""
        now = datetime.now(tz=timezone.utc).replace(microsecond=0)
        # Whole seconds, so the returned expiry equals the encoded "exp" claim
        expires_at = (now + self.token_ttl).replace(microsecond=0)
        claims: dict[str, Any] = {
            "exp": expires_at,
            "iat": now,
            USER_ID_CLAIM: user_id,
        }
        return jwt.encode(claims, self._signing_key, algorithm=self.algorithm), expires_at

    def create_jwt(self, user_id: str) -> str:
        token, _ = self.issue(user_id)
        return token

    def verify_jwt(self, token: str) -> str:
        """Return the user id carried by ``token``.

        Raises jwt.PyJWTError if the signature, algorithm or expiry is invalid,
        or if the user id claim is missing.
        """
        payload = jwt.decode(token, self._signing_key, algorithms=[self.algorithm])
        user_id = payload.get(USER_ID_CLAIM)
        if not user_id:
            raise jwt.InvalidTokenError("error get user claims from token")
        return str(user_id)


@lru_cache
def get_token_manager() -> TokenManager:
    return TokenManager(settings.signing_key, settings.access_token_ttl, settings.algorithm)
