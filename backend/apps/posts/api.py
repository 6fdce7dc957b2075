"""
Post API endpoints.

Create and list trade posts under pillars.
"""

from django.http import HttpRequest
from ninja import Query, Router
from ninja.errors import HttpError

from apps.core.schemas import ErrorResponse, ValidationErrorResponse
from apps.core.security import get_caller_id
from apps.posts.exceptions import PillarNotFoundError, UnauthenticatedError
from apps.posts.schemas import PostCreatedResponse, PostCreateRequest, PostListResponse
from apps.posts.services import create_post, list_posts

router = Router(tags=["posts"])


@router.post(
    "",
    response={
        201: PostCreatedResponse,
        400: ValidationErrorResponse,
        401: ErrorResponse,
        404: ErrorResponse,
    },
    by_alias=True,
    operation_id="createPost",
    summary="Create a post",
    description=(
        "Create a post under a pillar. The caller is identified by the "
        "x-test-user header (development only). Posts in pillars that require "
        "approval start PENDING, others APPROVED."
    ),
)
def create_post_endpoint(request: HttpRequest, payload: PostCreateRequest):
    """Create a post and its audit entry."""
    try:
        post = create_post(
            pillar_slug=payload.pillar_slug,
            author_id=get_caller_id(request),
            post_type=payload.type,
            free_text=payload.free_text,
            commodity=payload.commodity,
            quantity_min=payload.quantity_min,
            quantity_max=payload.quantity_max,
            location=payload.location,
            readiness_date=payload.readiness_date,
        )
    except PillarNotFoundError as e:
        raise HttpError(404, str(e)) from None
    except UnauthenticatedError as e:
        raise HttpError(401, str(e)) from None

    return 201, {"post": post}


@router.get(
    "",
    response=PostListResponse,
    by_alias=True,
    operation_id="listPosts",
    summary="List recent posts",
    description="Up to 100 most recent posts, newest first, optionally for one pillar.",
)
def list_posts_endpoint(
    request: HttpRequest,
    pillar_slug: str | None = Query(None, alias="pillarSlug"),
) -> dict:
    """List recent posts."""
    return {"posts": list_posts(pillar_slug=pillar_slug)}
