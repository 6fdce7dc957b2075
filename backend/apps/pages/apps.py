"""Pages app configuration."""

from django.apps import AppConfig


class PagesConfig(AppConfig):
    """Configuration for pages app (server-rendered landing and admin pages)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.pages"
