"""Admin configuration for accounts app."""

from django.contrib import admin

from apps.accounts.models import ProfessionalProfile, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin for User model."""

    list_display = ["email", "name", "role", "is_staff", "created_at"]
    list_filter = ["role", "is_staff"]
    search_fields = ["email", "name", "id"]
    readonly_fields = ["id", "created_at", "updated_at", "last_login"]
    exclude = ["password", "groups", "user_permissions"]
    ordering = ["-created_at"]


@admin.register(ProfessionalProfile)
class ProfessionalProfileAdmin(admin.ModelAdmin):
    """Admin for ProfessionalProfile model."""

    list_display = ["user", "service_type", "verified", "created_at"]
    list_filter = ["verified", "service_type"]
    search_fields = ["user__email", "service_type"]
    readonly_fields = ["id", "created_at"]
    ordering = ["-created_at"]
