from pydantic import BaseModel, Field

from models.user import User


class LoginRequest(BaseModel):
    name: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    token: str
    user: User
