import logging
from typing import Optional

import strawberry
from strawberry.types import Info

from graph.errors import NotFoundError
from graph.permissions import IsAuthenticated
from graph.types import PostNode

logger = logging.getLogger(__name__)


@strawberry.type
class Mutation:
    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def like_post(self, info: Info, post_id: strawberry.ID) -> Optional[PostNode]:
        """Like a post as the calling user. Liking the same post again changes nothing."""
        caller = info.context.caller
        post = info.context.store.append_like(post_id, caller.user_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} not found")

        logger.info(f"User '{caller.name}' (ID: {caller.user_id}) liked post {post_id}")
        return PostNode(model=post)
