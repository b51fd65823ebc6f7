"""
Test Suite for Bookshelf GraphQL

Test Organization:
- conftest.py: Shared fixtures (application, test client, stores)
- test_store.py: Record store unit tests
- test_graphql.py: Queries and mutations over HTTP
- test_schema.py: Schema contract and direct schema execution
- test_main.py: Root and health endpoints, GraphiQL page, configuration

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_graphql.py

    # Run with verbose output
    pytest -v
"""
