import logging
from typing import List, Dict, Any

from fastapi import APIRouter, HTTPException, Query

from dependencies import Store, CurrentUser
from models.post import Post, Comment
from models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/{user_id}", response_model=User)
def get_user(user_id: str, store: Store):
    """Get a single user by ID"""
    logger.debug(f"REST lookup user {user_id}")
    user = store.find_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/posts", response_model=List[Post])
def get_posts(store: Store, author_id: str = Query(..., alias="authorId")):
    """Get all posts written by one author"""
    logger.debug(f"REST lookup posts by author {author_id}")
    return store.posts_by_author(author_id)


@router.get("/comments", response_model=List[Comment])
def get_comments(store: Store, post_id: str = Query(..., alias="postId")):
    """Get all comments on one post"""
    logger.debug(f"REST lookup comments on post {post_id}")
    return store.comments_for_post(post_id)


@router.get("/protected-profile")
async def protected_profile(current_user: CurrentUser) -> Dict[str, Any]:
    """Only reachable with a valid bearer token"""
    return {
        "access": "granted",
        "message": f"Welcome to the secret area, {current_user.name}!",
        "secretData": "GraphQL really is very efficient.",
    }
