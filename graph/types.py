"""
Object types of the graph schema.

Scalar fields read straight from the wrapped model. Each relation field is
bound to exactly one function in services.relations and is only evaluated
when the query selects it.
"""
from typing import List, Optional

import strawberry
from strawberry.types import Info

from models.post import Post, Comment
from models.user import User
from services import relations


@strawberry.type(name="User")
class UserNode:
    model: strawberry.Private[User]

    @strawberry.field
    def id(self) -> strawberry.ID:
        return strawberry.ID(self.model.id)

    @strawberry.field
    def name(self) -> Optional[str]:
        return self.model.name

    @strawberry.field
    def avatar(self) -> Optional[str]:
        return self.model.avatar

    @strawberry.field
    def friends(self, info: Info) -> List["UserNode"]:
        return [UserNode(model=u) for u in relations.friends_of(info.context.store, self.model)]

    @strawberry.field
    def posts(self, info: Info) -> List["PostNode"]:
        return [PostNode(model=p) for p in relations.posts_of(info.context.store, self.model)]


@strawberry.type(name="Post")
class PostNode:
    model: strawberry.Private[Post]

    @strawberry.field
    def id(self) -> strawberry.ID:
        return strawberry.ID(self.model.id)

    @strawberry.field
    def content(self) -> Optional[str]:
        return self.model.content

    @strawberry.field
    def author(self, info: Info) -> Optional[UserNode]:
        author = relations.author_of(info.context.store, self.model)
        return UserNode(model=author) if author else None

    @strawberry.field
    def likes(self, info: Info) -> List[UserNode]:
        return [UserNode(model=u) for u in relations.likers_of(info.context.store, self.model)]

    @strawberry.field
    def comments(self, info: Info) -> List["CommentNode"]:
        return [CommentNode(model=c) for c in relations.comments_of(info.context.store, self.model)]


@strawberry.type(name="Comment")
class CommentNode:
    model: strawberry.Private[Comment]

    @strawberry.field
    def id(self) -> strawberry.ID:
        return strawberry.ID(self.model.id)

    @strawberry.field
    def text(self) -> Optional[str]:
        return self.model.text

    @strawberry.field
    def author(self, info: Info) -> Optional[UserNode]:
        author = relations.comment_author(info.context.store, self.model)
        return UserNode(model=author) if author else None
