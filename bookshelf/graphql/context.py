"""
GraphQL Context

Provides request context to all GraphQL resolvers. The only thing resolvers
need is the record store owned by the running application.

The context is created fresh for each GraphQL request and passed
to all resolvers via the `info` parameter.
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from bookshelf.store import RecordStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        store: The application's in-memory record store
    """

    def __init__(self, store: RecordStore):
        self.store = store


async def get_context(request: Request) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    The store is built by the application factory and kept on app.state,
    so every request of one application instance shares it.

    Args:
        request: FastAPI request object

    Returns:
        GraphQLContext with the application's store
    """
    return GraphQLContext(store=request.app.state.store)
