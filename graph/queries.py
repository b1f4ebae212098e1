from typing import List, Optional

import strawberry
from strawberry.types import Info

from graph.types import UserNode, PostNode
from services import relations


@strawberry.type
class Query:
    @strawberry.field
    def user(self, info: Info, id: strawberry.ID) -> Optional[UserNode]:
        user = info.context.store.find_user(id)
        return UserNode(model=user) if user else None

    @strawberry.field
    def post(self, info: Info, id: strawberry.ID) -> Optional[PostNode]:
        post = info.context.store.find_post(id)
        return PostNode(model=post) if post else None

    @strawberry.field
    def feed_for_user(self, info: Info, id: strawberry.ID) -> List[PostNode]:
        """Posts authored by the friends the user lists, empty for an unknown user"""
        user = info.context.store.find_user(id)
        if user is None:
            return []
        return [PostNode(model=p) for p in relations.feed_for(info.context.store, user)]
