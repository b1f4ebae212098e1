import time
from typing import Any, Callable, Dict

import jwt

from models.user import Caller

DEFAULT_TTL_SECONDS = 60 * 60  # 1 hour


class TokenError(Exception):
    """Base class for credentials that cannot be accepted"""


class InvalidTokenError(TokenError):
    """Signature mismatch, tampered payload or garbage input"""


class ExpiredTokenError(TokenError):
    """Well-formed and correctly signed, but past its expiry"""


class TokenService:
    def __init__(
            self,
            secret: str,
            ttl_seconds: int = DEFAULT_TTL_SECONDS,
            algorithm: str = "HS256",
            clock: Callable[[], float] = time.time,
    ):
        """
        Issue and verify signed, time-limited credentials

        Args:
            secret: HMAC key shared by every token of this process
            ttl_seconds: lifetime of an issued token
            algorithm: JWT signing algorithm, the only one accepted on verify
            clock: source of the current unix time, used for both issue and verify
        """
        self.secret = secret
        self.ttl_seconds = ttl_seconds
        self.algorithm = algorithm
        self.clock = clock

    def issue(self, user_id: str, name: str) -> str:
        """Create a token binding user_id and display name, valid for ttl_seconds"""
        issued_at = int(self.clock())
        payload: Dict[str, Any] = {
            "userId": user_id,
            "name": name,
            "iat": issued_at,
            "exp": issued_at + self.ttl_seconds,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Caller:
        """
        Check signature and expiry and return the identity inside the token

        Raises:
            InvalidTokenError: the token is malformed or its signature does not match
            ExpiredTokenError: the token is authentic but has expired
        """
        try:
            # expiry is checked below against self.clock rather than wall time
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={
                    "require": ["userId", "name", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e)) from e

        try:
            expires_at = int(payload["exp"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Expiration time is not an integer") from e

        if self.clock() >= expires_at:
            raise ExpiredTokenError("Token has expired")

        user_id, name = payload["userId"], payload["name"]
        if not isinstance(user_id, str) or not isinstance(name, str):
            raise InvalidTokenError("Token identity claims must be strings")

        return Caller(user_id=user_id, name=name)
