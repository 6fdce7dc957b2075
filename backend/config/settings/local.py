"""
Local development settings.

Extends base settings with development-friendly defaults.
"""

from .base import *  # noqa: F403
from .base import settings

DEBUG = True
ALLOWED_HOSTS = ["localhost", "127.0.0.1", *settings.ALLOWED_HOSTS]

# Pretty console logs in development
LOG_JSON_FORMAT = False
LOG_LEVEL = "DEBUG" if settings.LOG_LEVEL == "INFO" else settings.LOG_LEVEL
