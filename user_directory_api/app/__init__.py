"""
Application package initializer.

The package is split into ``core`` (configuration, logging, database
bootstrap), ``services`` (persistence), ``schemas`` (request and
response models) and ``api`` (routes and error handling).
"""

from .main import app  # noqa: F401
