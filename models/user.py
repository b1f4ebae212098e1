from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    name: str
    avatar: Optional[str] = None
    friend_ids: List[str] = Field(default_factory=list, alias="friendIds")


class Caller(BaseModel):
    """Identity established from a verified token"""
    model_config = ConfigDict(frozen=True)

    user_id: str
    name: str
