"""URL routes for server-rendered pages."""

from django.urls import path

from apps.pages import views

app_name = "pages"

urlpatterns = [
    path("", views.home, name="home"),
    path("admin/dashboard/", views.admin_dashboard, name="admin-dashboard"),
]
