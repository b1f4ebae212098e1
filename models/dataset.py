from typing import List

from pydantic import BaseModel

from models.post import Post, Comment
from models.user import User


class Dataset(BaseModel):
    """Shape of the JSON document the store is loaded from"""
    users: List[User] = []
    posts: List[Post] = []
    comments: List[Comment] = []
