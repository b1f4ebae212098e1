import logging
from threading import Lock
from typing import List, Optional

from models.dataset import Dataset
from models.post import Post, Comment
from models.user import User

logger = logging.getLogger(__name__)


class DatasetStore:
    """
    In-memory users/posts/comments, loaded once and shared by every request.

    Reads are lock-free linear scans in storage order. The only mutation is
    append_like, which holds the store lock for its check-then-append.
    """

    def __init__(self, users: List[User], posts: List[Post], comments: List[Comment]):
        self._users = list(users)
        self._posts = list(posts)
        self._comments = list(comments)
        self._like_lock = Lock()

    @classmethod
    def from_dataset(cls, dataset: Dataset) -> "DatasetStore":
        return cls(dataset.users, dataset.posts, dataset.comments)

    @property
    def users(self) -> List[User]:
        return self._users

    @property
    def posts(self) -> List[Post]:
        return self._posts

    @property
    def comments(self) -> List[Comment]:
        return self._comments

    def find_user(self, user_id: str) -> Optional[User]:
        """Get a user by ID, None if there is no such user"""
        return next((u for u in self._users if u.id == user_id), None)

    def find_post(self, post_id: str) -> Optional[Post]:
        """Get a post by ID, None if there is no such post"""
        return next((p for p in self._posts if p.id == post_id), None)

    def comments_for_post(self, post_id: str) -> List[Comment]:
        return [c for c in self._comments if c.post_id == post_id]

    def posts_by_author(self, author_id: str) -> List[Post]:
        return [p for p in self._posts if p.author_id == author_id]

    def append_like(self, post_id: str, user_id: str) -> Optional[Post]:
        """
        Record that a user liked a post.

        Liking a post twice is a no-op. Returns the post, or None if the
        post does not exist.
        """
        with self._like_lock:
            post = self.find_post(post_id)
            if post is None:
                return None

            if user_id not in post.like_user_ids:
                post.like_user_ids.append(user_id)
            else:
                logger.debug(f"User {user_id} already liked post {post_id}")

            return post
