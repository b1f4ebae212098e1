import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.user import Caller
from services.tokens import TokenService, TokenError

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class MalformedAuthorizationError(Exception):
    """Authorization header present but not of the form 'Bearer <token>'"""


class AuthStatus(Enum):
    ANONYMOUS = "anonymous"
    REJECTED = "rejected"
    IDENTIFIED = "identified"


@dataclass(frozen=True)
class AuthResult:
    status: AuthStatus
    caller: Optional[Caller] = None
    reason: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.caller is not None


def parse_authorization(header: Optional[str]) -> Optional[str]:
    """
    Extract the token from an Authorization header

    :return: the token, or None when no header was sent
    :raises MalformedAuthorizationError: wrong scheme, missing scheme or empty token
    """
    if header is None or not header.strip():
        return None

    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        raise MalformedAuthorizationError("Authorization scheme must be Bearer")

    token = token.strip()
    if not token:
        raise MalformedAuthorizationError("Bearer token is empty")
    return token


def resolve_caller(header: Optional[str], tokens: TokenService) -> AuthResult:
    """Turn an Authorization header into a caller identity without raising"""
    try:
        token = parse_authorization(header)
    except MalformedAuthorizationError as e:
        logger.warning(f"Rejected authorization header: {e}")
        return AuthResult(AuthStatus.REJECTED, reason=str(e))

    if token is None:
        return AuthResult(AuthStatus.ANONYMOUS)

    try:
        caller = tokens.verify(token)
    except TokenError as e:
        logger.warning(f"Rejected token ({type(e).__name__}): {e}")
        return AuthResult(AuthStatus.REJECTED, reason=str(e))

    return AuthResult(AuthStatus.IDENTIFIED, caller=caller)
