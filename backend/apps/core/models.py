"""
Core models - shared base classes and utilities.
"""

import uuid

from django.db import models

ID_MAX_LENGTH = 64


def generate_id() -> str:
    """
    Generate an opaque, URL-safe primary key.

    String ids let callers refer to records verbatim (the dev identity
    header carries a user id such as ``test-user-1``).
    """
    return f"c{uuid.uuid4().hex}"


class IdentifiedModel(models.Model):
    """Abstract base model with a generated string primary key."""

    id = models.CharField(
        primary_key=True,
        max_length=ID_MAX_LENGTH,
        default=generate_id,
        editable=False,
    )

    class Meta:
        abstract = True


class TimestampedModel(IdentifiedModel):
    """
    Abstract base model with created_at/updated_at timestamps.

    Business entities that are edited after creation inherit from this.
    Append-only records carry only ``created_at``.
    """

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
