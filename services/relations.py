"""
Relation fields of the social graph.

Every function is a read-only scan over the store and returns results in
storage order. Dangling references resolve to None or an empty list.
"""
from typing import List, Optional

from models.post import Post, Comment
from models.user import User
from services.store import DatasetStore


def friends_of(store: DatasetStore, user: User) -> List[User]:
    """Users listed in user.friend_ids (outward only, no symmetry assumed)"""
    friend_ids = set(user.friend_ids)
    return [u for u in store.users if u.id in friend_ids]


def posts_of(store: DatasetStore, user: User) -> List[Post]:
    return store.posts_by_author(user.id)


def author_of(store: DatasetStore, post: Post) -> Optional[User]:
    return store.find_user(post.author_id)


def likers_of(store: DatasetStore, post: Post) -> List[User]:
    liker_ids = set(post.like_user_ids)
    return [u for u in store.users if u.id in liker_ids]


def comments_of(store: DatasetStore, post: Post) -> List[Comment]:
    return store.comments_for_post(post.id)


def comment_author(store: DatasetStore, comment: Comment) -> Optional[User]:
    return store.find_user(comment.author_id)


def feed_for(store: DatasetStore, user: User) -> List[Post]:
    """Posts written by the users this user lists as friends"""
    friend_ids = set(user.friend_ids)
    return [p for p in store.posts if p.author_id in friend_ids]
