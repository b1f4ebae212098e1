from typing import Annotated

from fastapi import Request, Depends, HTTPException

from models.user import Caller
from services.auth_gate import AuthResult, MalformedAuthorizationError, parse_authorization, resolve_caller
from services.store import DatasetStore
from services.tokens import TokenService, TokenError


async def get_store(request: Request) -> DatasetStore:
    """Get the dataset store from app state"""
    return request.app.state.store


async def get_token_service(request: Request) -> TokenService:
    """Get the token service from app state"""
    return request.app.state.token_service


async def get_current_user(request: Request) -> Caller:
    """
    Verify the bearer token from the Authorization header and return the caller.

    403 when the header is missing or malformed, 401 when the token is invalid or expired.
    """
    try:
        token = parse_authorization(request.headers.get("Authorization"))
    except MalformedAuthorizationError:
        raise HTTPException(status_code=403, detail="Malformed token")

    if token is None:
        raise HTTPException(status_code=403, detail="No token provided")

    try:
        return request.app.state.token_service.verify(token)
    except TokenError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")


async def get_auth_result(request: Request) -> AuthResult:
    """Resolve the caller for the graph endpoint, never failing the request"""
    return resolve_caller(request.headers.get("Authorization"), request.app.state.token_service)


# Type annotations for dependency injection
CurrentUser = Annotated[Caller, Depends(get_current_user)]
Auth = Annotated[AuthResult, Depends(get_auth_result)]
Store = Annotated[DatasetStore, Depends(get_store)]
Tokens = Annotated[TokenService, Depends(get_token_service)]
