"""
URL configuration for the backend.
"""

from django.contrib import admin
from django.urls import include, path

from .api import api

urlpatterns = [
    # Pages first: /admin/dashboard/ must win over the Django admin catch-all
    path("", include("apps.pages.urls")),
    path("admin/", admin.site.urls),
    path("api/", api.urls),
]
