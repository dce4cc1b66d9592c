"""REST API presentation layer for Donare.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain errors to HTTP responses
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from donare.presentation.api.app import create_app

__all__ = ["create_app"]
