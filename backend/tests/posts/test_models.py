"""
Tests for posts models.
"""

import pytest
from django.db import IntegrityError

from apps.posts.models import ImmutableRecordError, Pillar, PostAudit, PostStatus
from tests.posts.factories import PillarFactory, PostAuditFactory, PostFactory


@pytest.mark.django_db
class TestPillarModel:
    """Tests for Pillar model."""

    def test_requires_approval_by_default(self) -> None:
        pillar = PillarFactory.create()

        assert pillar.require_approval is True

    def test_slug_is_unique(self) -> None:
        PillarFactory.create(slug="pulse")

        with pytest.raises(IntegrityError):
            Pillar.objects.create(slug="pulse", name="Pulse again")


@pytest.mark.django_db
class TestPostModel:
    """Tests for Post model."""

    def test_defaults(self) -> None:
        post = PostFactory.create(status=PostStatus.PENDING)

        assert post.flags == 0
        assert post.status == PostStatus.PENDING
        assert post.readiness_date is None

    def test_str(self) -> None:
        post = PostFactory.create(type="buy", commodity=None, status=PostStatus.APPROVED)

        assert str(post) == "buy: Commodity (APPROVED)"


@pytest.mark.django_db
class TestPostAuditModel:
    """Tests for the append-only PostAudit model."""

    def test_create(self) -> None:
        audit = PostAuditFactory.create()

        assert audit.change == {"created": True}
        assert audit.user == audit.post.author
        assert list(audit.post.audits.all()) == [audit]

    def test_save_existing_row_raises(self) -> None:
        audit = PostAuditFactory.create()
        audit.reason = "edited"

        with pytest.raises(ImmutableRecordError):
            audit.save()

        audit.refresh_from_db()
        assert audit.reason is None

    def test_delete_raises(self) -> None:
        audit = PostAuditFactory.create()

        with pytest.raises(ImmutableRecordError):
            audit.delete()

        assert PostAudit.objects.filter(pk=audit.pk).exists()

    def test_bulk_update_raises(self) -> None:
        PostAuditFactory.create()

        with pytest.raises(ImmutableRecordError):
            PostAudit.objects.all().update(reason="bulk")

    def test_bulk_delete_raises(self) -> None:
        PostAuditFactory.create()

        with pytest.raises(ImmutableRecordError):
            PostAudit.objects.all().delete()

        assert PostAudit.objects.count() == 1
