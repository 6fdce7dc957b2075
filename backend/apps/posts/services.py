"""
Post services.

Creates posts under pillars (with their audit entry) and lists recent posts.
"""

from datetime import UTC, datetime

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.core.logging import get_logger
from apps.core.security import get_identity_header_name
from apps.posts.exceptions import PillarNotFoundError, UnauthenticatedError
from apps.posts.models import Pillar, Post, PostAudit, PostStatus

logger = get_logger(__name__)

CREATED_CHANGE = {"created": True}


def resolve_status(pillar: Pillar) -> PostStatus:
    """Initial status for a new post: moderated pillars start PENDING."""
    return PostStatus.PENDING if pillar.require_approval else PostStatus.APPROVED


def _resolve_author(author_id: str | None) -> User:
    if not author_id:
        raise UnauthenticatedError(
            f"Unauthenticated (use {get_identity_header_name()} header in dev)"
        )
    author = User.objects.filter(pk=author_id, is_active=True).first()
    if author is None:
        raise UnauthenticatedError("Unknown user")
    return author


def create_post(
    *,
    pillar_slug: str,
    author_id: str | None,
    post_type: str,
    free_text: str,
    commodity: str | None = None,
    quantity_min: int | None = None,
    quantity_max: int | None = None,
    location: str | None = None,
    readiness_date: datetime | None = None,
) -> Post:
    """
    Create a post under a pillar and record its creation in the audit log.

    The post and its audit entry are written in one transaction: either both
    exist afterwards or neither does.

    Args:
        pillar_slug: Slug of the pillar to post under
        author_id: Caller's user id (None if the caller did not identify)
        post_type: Post kind, e.g. 'sell'
        free_text: Free-form details
        commodity: Optional commodity name
        quantity_min: Optional lower bound of the quantity range
        quantity_max: Optional upper bound of the quantity range
        location: Optional location
        readiness_date: Optional date the goods are ready

    Returns:
        The created Post

    Raises:
        PillarNotFoundError: No pillar with that slug
        UnauthenticatedError: Caller missing or not an active user
    """
    pillar = Pillar.objects.filter(slug=pillar_slug).first()
    if pillar is None:
        logger.warning("post_create_rejected", reason="pillar_not_found", pillar_slug=pillar_slug)
        raise PillarNotFoundError("Pillar not found")

    try:
        author = _resolve_author(author_id)
    except UnauthenticatedError:
        logger.warning("post_create_rejected", reason="unauthenticated", pillar_slug=pillar_slug)
        raise

    if readiness_date is not None and timezone.is_naive(readiness_date):
        readiness_date = timezone.make_aware(readiness_date, UTC)

    status = resolve_status(pillar)

    with transaction.atomic():
        post = Post.objects.create(
            pillar=pillar,
            author=author,
            type=post_type,
            commodity=commodity,
            quantity_min=quantity_min,
            quantity_max=quantity_max,
            location=location,
            readiness_date=readiness_date,
            free_text=free_text,
            status=status,
        )
        PostAudit.objects.create(post=post, user=author, change=dict(CREATED_CHANGE))

    logger.info(
        "post_created",
        post_id=post.id,
        pillar_slug=pillar.slug,
        author_id=author.id,
        status=status,
    )

    return post


def list_posts(pillar_slug: str | None = None, limit: int | None = None) -> list[Post]:
    """
    List the most recent posts, newest first.

    Args:
        pillar_slug: Only include posts from this pillar (all pillars if empty)
        limit: Maximum number of posts (defaults to POST_LIST_LIMIT)

    Returns:
        Up to ``limit`` posts ordered by descending creation time
    """
    if limit is None:
        limit = settings.POST_LIST_LIMIT

    posts = Post.objects.all()
    if pillar_slug:
        posts = posts.filter(pillar__slug=pillar_slug)

    return list(posts.order_by("-created_at", "-id")[:limit])
