"""
Graph query surface.

A Strawberry schema over the in-memory dataset: users, their friends and
posts, posts with their author, likers and comments. Served at /graphql.

Example query:
    query {
        user(id: "1") {
            name
            friends { name }
            posts { content comments { text author { name } } }
        }
    }
"""
from typing import Optional

import strawberry
from strawberry.fastapi import GraphQLRouter

from graph.context import get_context
from graph.mutations import Mutation
from graph.queries import Query

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router(graphql_ide: Optional[str] = "graphiql") -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Args:
        graphql_ide: "graphiql", "apollo-sandbox", or None to disable the browser IDE
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=graphql_ide,
    )


__all__ = ["schema", "create_graphql_router"]
