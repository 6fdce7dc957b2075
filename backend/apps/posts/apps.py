"""Posts app configuration."""

from django.apps import AppConfig


class PostsConfig(AppConfig):
    """Configuration for posts app (pillars, trade posts, audit trail)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.posts"
