"""
Core security - caller identity for API requests.

There is no real authentication yet. In its place, callers name their user
id in a development-only header (``x-test-user`` by default, see
``DEV_IDENTITY_HEADER``). Everything that needs the caller goes through
``get_caller_id`` so the mechanism can be replaced in one place.
"""

from django.conf import settings
from django.http import HttpRequest


def get_identity_header_name() -> str:
    """Name of the header carrying the caller's user id."""
    return getattr(settings, "DEV_IDENTITY_HEADER", "x-test-user")


def get_caller_id(request: HttpRequest) -> str | None:
    """
    Return the caller's user id from the identity header, or None.

    Blank values count as missing.
    """
    value = request.headers.get(get_identity_header_name(), "")
    return value.strip() or None
