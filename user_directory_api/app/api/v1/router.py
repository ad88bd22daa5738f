"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  The user routes define
their full paths (``/get``, ``/add``, ``/update/{id}``,
``/delete/{id}``) themselves, so they are included without a prefix
of their own; ``create_app`` decides where the whole router is mounted.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, tags=["users"])
