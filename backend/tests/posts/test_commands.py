"""
Tests for the seed_tradeflow management command.
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.accounts.models import User
from apps.posts.models import Pillar, Post, PostAudit, PostStatus


def _seed(**options) -> str:
    out = StringIO()
    call_command("seed_tradeflow", stdout=out, **options)
    return out.getvalue()


@pytest.mark.django_db
class TestSeedCommand:
    """Tests for seed_tradeflow."""

    def test_creates_default_pillar_and_dev_user(self, settings) -> None:
        output = _seed()

        pillar = Pillar.objects.get(slug=settings.DEFAULT_PILLAR_SLUG)
        assert pillar.require_approval is False
        assert User.objects.filter(pk=settings.DEV_TEST_USER_ID).exists()
        assert "Seed complete." in output

    def test_is_idempotent(self) -> None:
        _seed()
        output = _seed()

        assert Pillar.objects.count() == 1
        assert User.objects.count() == 1
        assert "already exists" in output

    def test_creates_sample_posts_with_audits(self) -> None:
        _seed(posts=4)

        assert Post.objects.count() == 4
        assert PostAudit.objects.count() == 4
        assert set(Post.objects.values_list("status", flat=True)) == {PostStatus.APPROVED}

    def test_require_approval_flag(self) -> None:
        _seed(require_approval=True, posts=1)

        assert Post.objects.get().status == PostStatus.PENDING

    def test_custom_pillar_and_user(self) -> None:
        _seed(pillar="grain-board", user_id="trader-7")

        assert Pillar.objects.get(slug="grain-board").name == "Grain Board"
        assert User.objects.get(pk="trader-7").email == "trader-7@tradeflow.local"

    def test_negative_post_count_rejected(self) -> None:
        with pytest.raises(CommandError):
            _seed(posts=-1)
