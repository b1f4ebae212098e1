from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    content: Optional[str] = None
    author_id: str = Field(..., alias="authorId")
    like_user_ids: List[str] = Field(default_factory=list, alias="likeUserIds")


class Comment(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    text: Optional[str] = None
    post_id: str = Field(..., alias="postId")
    author_id: str = Field(..., alias="authorId")
