"""
Exceptions raised by the storage layer.
"""


class StorageError(Exception):
    """A statement against the user database failed."""


class DuplicateUserError(StorageError):
    """The (first_name, last_name) pair is already taken."""
