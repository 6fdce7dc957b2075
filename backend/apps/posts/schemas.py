"""
Pydantic schemas for post API endpoints.

JSON uses camelCase keys (``pillarSlug``, ``freeText``); Python attributes
stay snake_case.
"""

from datetime import datetime

from ninja import Schema
from pydantic import ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from apps.posts.models import PostStatus

FREE_TEXT_MIN_LENGTH = 5
TYPE_MAX_LENGTH = 50
TEXT_FIELD_MAX_LENGTH = 255


class CamelSchema(Schema):
    """Schema that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PostCreateRequest(CamelSchema):
    """Request to create a post under a pillar."""

    pillar_slug: str = Field(description="Slug of the pillar to post under (e.g. 'pulse')")
    type: str = Field(
        max_length=TYPE_MAX_LENGTH,
        description="Post kind, e.g. 'sell' or 'buy'",
    )
    commodity: str | None = Field(default=None, max_length=TEXT_FIELD_MAX_LENGTH)
    # Whole JSON numbers only: no numeric strings or booleans
    quantity_min: StrictInt | None = None
    quantity_max: StrictInt | None = None
    location: str | None = Field(default=None, max_length=TEXT_FIELD_MAX_LENGTH)
    readiness_date: datetime | None = Field(
        default=None,
        description="When the goods are ready (ISO 8601)",
    )
    free_text: str = Field(
        min_length=FREE_TEXT_MIN_LENGTH,
        description="Free-form details, WhatsApp-friendly",
    )


class PostResponse(CamelSchema):
    """A persisted post."""

    id: str
    pillar_id: str
    author_id: str
    type: str
    commodity: str | None
    quantity_min: int | None
    quantity_max: int | None
    location: str | None
    readiness_date: datetime | None
    free_text: str
    status: PostStatus
    flags: int
    created_at: datetime
    updated_at: datetime


class PostCreatedResponse(Schema):
    """Response after creating a post."""

    post: PostResponse


class PostListResponse(Schema):
    """Response with the most recent posts."""

    posts: list[PostResponse]
