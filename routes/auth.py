import logging

from fastapi import APIRouter, HTTPException

from dependencies import Store, Tokens
from models.token import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, store: Store, tokens: Tokens):
    """
    Log in by display name.

    The name is matched case-insensitively as a prefix of each user's display name; the first match wins.
    """
    prefix = request.name.lower()
    user = next((u for u in store.users if u.name.lower().startswith(prefix)), None)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")

    token = tokens.issue(user.id, user.name)
    logger.info(f"User '{user.name}' logged in. Token issued.")
    return {"token": token, "user": user}
