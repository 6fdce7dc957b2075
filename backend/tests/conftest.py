"""
Shared pytest fixtures for all tests.

This module provides common fixtures used across multiple test modules.
Individual test modules can override these fixtures if needed.

Factories
---------
Import factories directly from their modules:

    from tests.accounts.factories import UserFactory, ProfessionalProfileFactory
    from tests.posts.factories import PillarFactory, PostFactory

Example usage:

    @pytest.mark.django_db
    def test_something():
        pillar = PillarFactory.create(slug="pulse", require_approval=False)
        post = PostFactory.create(pillar=pillar)
"""

from collections.abc import Callable
from typing import Any

import pytest
from django.test import Client, RequestFactory


@pytest.fixture
def request_factory() -> RequestFactory:
    """
    Django request factory for unit testing views.

    Use this when you need to call Django Ninja endpoint functions directly
    without going through the full HTTP stack.
    """
    return RequestFactory()


@pytest.fixture
def api_client() -> Client:
    """
    Django test client for full HTTP request/response cycle tests.

    Example:
        def test_api_returns_200(api_client):
            response = api_client.get("/api/health")
            assert response.status_code == 200
    """
    return Client()


@pytest.fixture
def dev_user(db, settings):
    """The development user the Pulse form and x-test-user header refer to."""
    from tests.accounts.factories import UserFactory

    return UserFactory.create(id=settings.DEV_TEST_USER_ID)


@pytest.fixture
def open_pillar(db, settings):
    """Default pillar whose posts are published without approval."""
    from tests.posts.factories import PillarFactory

    return PillarFactory.create(slug=settings.DEFAULT_PILLAR_SLUG, require_approval=False)


@pytest.fixture
def moderated_pillar(db):
    """Pillar whose posts wait for approval."""
    from tests.posts.factories import PillarFactory

    return PillarFactory.create(slug="moderated", require_approval=True)


@pytest.fixture
def post_payload() -> Callable[..., dict[str, Any]]:
    """
    Factory fixture for camelCase create-post request bodies.

    Example:
        body = post_payload(pillarSlug="pulse", freeText="Five+ chars")
    """

    def _make(**overrides: Any) -> dict[str, Any]:
        body: dict[str, Any] = {
            "pillarSlug": "pulse",
            "type": "sell",
            "commodity": "maize",
            "quantityMin": 10,
            "quantityMax": 20,
            "location": "Kano",
            "freeText": "Dry white maize, bagged.",
        }
        body.update(overrides)
        return body

    return _make
