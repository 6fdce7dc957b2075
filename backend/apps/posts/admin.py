"""Admin configuration for posts app."""

from django.contrib import admin

from apps.posts.models import Pillar, Post, PostAudit


@admin.register(Pillar)
class PillarAdmin(admin.ModelAdmin):
    """Admin for Pillar model."""

    list_display = ["slug", "name", "require_approval", "created_at"]
    list_filter = ["require_approval"]
    search_fields = ["slug", "name"]
    readonly_fields = ["id", "created_at"]
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """Admin for Post model. Status is shown, not edited."""

    list_display = ["id", "pillar", "author", "type", "commodity", "status", "flags", "created_at"]
    list_filter = ["status", "pillar", "type"]
    search_fields = ["id", "commodity", "location", "free_text", "author__email"]
    readonly_fields = ["id", "status", "flags", "created_at", "updated_at"]
    raw_id_fields = ["author"]
    ordering = ["-created_at"]


@admin.register(PostAudit)
class PostAuditAdmin(admin.ModelAdmin):
    """Admin for PostAudit model. Entries are append-only."""

    list_display = ["id", "post", "user", "reason", "created_at"]
    search_fields = ["post__id", "user__email"]
    readonly_fields = ["id", "post", "user", "change", "reason", "created_at"]
    ordering = ["-created_at"]

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
