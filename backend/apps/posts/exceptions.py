"""
Exceptions for posts app.
"""


class PostError(Exception):
    """Base exception for post operations."""

    pass


class PillarNotFoundError(PostError):
    """No pillar exists with the requested slug."""

    pass


class UnauthenticatedError(PostError):
    """The caller did not identify as an existing user."""

    pass
