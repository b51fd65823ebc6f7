"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Features:
- "books" and "author" types with their relationships
- Query resolvers for single records and full lists
- Mutation resolvers that append records to the store
- GraphiQL explorer for development

Usage:
    The GraphQL endpoint is available at /graphql (GRAPHQL_PATH) with an
    interactive GraphiQL page when GRAPHIQL_ENABLED is true.

Example Query:
    query {
        author(id: 2) {
            name
            books { id name }
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from bookshelf.graphql.context import get_context
from bookshelf.graphql.mutations import Mutation
from bookshelf.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router(graphiql_enabled: bool = True) -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Args:
        graphiql_enabled: Serve the GraphiQL explorer to browsers

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql_enabled else None,
    )


__all__ = ["schema", "create_graphql_router"]
