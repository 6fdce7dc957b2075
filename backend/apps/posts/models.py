"""
Posts models - pillars, trade posts and the post audit trail.
"""

from django.conf import settings
from django.db import models

from apps.core.models import IdentifiedModel, TimestampedModel


class ImmutableRecordError(Exception):
    """Raised when code tries to modify or delete an append-only record."""

    pass


class Pillar(IdentifiedModel):
    """
    A post category (e.g. "pulse").

    The pillar decides whether its posts are published straight away or
    wait for moderation. ``template`` describes the post form for the
    pillar and is stored as-is.
    """

    slug = models.SlugField(max_length=100, unique=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    template = models.JSONField(
        default=dict,
        blank=True,
        help_text="Free-form post template for this pillar",
    )
    require_approval = models.BooleanField(
        default=True,
        help_text="New posts start PENDING instead of APPROVED",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.slug


class PostStatus(models.TextChoices):
    """Moderation status of a post."""

    PENDING = "PENDING", "Pending"
    APPROVED = "APPROVED", "Approved"
    REJECTED = "REJECTED", "Rejected"
    FLAGGED = "FLAGGED", "Flagged"


class Post(TimestampedModel):
    """
    A trade interest (offer or request) submitted under a pillar.
    """

    pillar = models.ForeignKey(
        Pillar,
        on_delete=models.PROTECT,
        related_name="posts",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="posts",
    )
    type = models.CharField(
        max_length=50,
        help_text="Post kind, e.g. 'sell' or 'buy'",
    )
    commodity = models.CharField(max_length=255, blank=True, null=True)
    quantity_min = models.IntegerField(blank=True, null=True)
    quantity_max = models.IntegerField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)
    readiness_date = models.DateTimeField(blank=True, null=True)
    free_text = models.TextField()
    status = models.CharField(
        max_length=20,
        choices=PostStatus.choices,
        default=PostStatus.PENDING,
        db_index=True,
    )
    flags = models.IntegerField(default=0)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["pillar", "created_at"], name="post_pillar_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.type}: {self.commodity or 'Commodity'} ({self.status})"


class PostAuditQuerySet(models.QuerySet["PostAudit"]):
    """QuerySet that refuses bulk updates and deletes."""

    def update(self, **kwargs):  # type: ignore[no-untyped-def]
        raise ImmutableRecordError("Post audit entries cannot be modified.")

    def delete(self):  # type: ignore[no-untyped-def]
        raise ImmutableRecordError("Post audit entries cannot be deleted.")


class PostAudit(IdentifiedModel):
    """
    Append-only log entry for a change made to a post.

    Rows are written once and never updated or deleted.
    """

    post = models.ForeignKey(
        Post,
        on_delete=models.PROTECT,
        related_name="audits",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="post_audits",
    )
    change = models.JSONField(help_text="What changed, e.g. {'created': true}")
    reason = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = PostAuditQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"PostAudit {self.id} for {self.post_id}"

    def save(self, *args, **kwargs) -> None:  # type: ignore[no-untyped-def]
        if not self._state.adding:
            raise ImmutableRecordError("Post audit entries cannot be modified.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        raise ImmutableRecordError("Post audit entries cannot be deleted.")
