"""
API dependencies.

The user store is created by ``create_app`` and kept on
``app.state``; handlers receive it through ``get_user_store``.  Tests
may replace it with ``app.dependency_overrides[get_user_store]``.
"""

from fastapi import Request

from ..services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store attached to the running application."""
    return request.app.state.user_store
