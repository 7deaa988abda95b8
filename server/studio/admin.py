from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from studio.models import GeneratedHeadshot, GenerationJob, ImageUpload, StyleOption, User
from studio.services import update_job_status


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin for custom User model."""

    list_display = ["email", "name", "is_staff", "created_at"]
    list_filter = ["is_staff", "created_at"]
    search_fields = ["email", "name"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        (None, {"fields": ("email", "name", "password")}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Important Dates", {"fields": ("last_login", "created_at", "updated_at")}),
    )

    add_fieldsets = (
        (None, {"classes": ("wide",), "fields": ("email", "name", "password1", "password2")}),
    )

    ordering = ["-created_at"]


@admin.register(ImageUpload)
class ImageUploadAdmin(admin.ModelAdmin):
    """Admin for ImageUpload model."""

    list_display = ["id", "user", "original_filename", "mime_type", "file_size", "upload_status", "created_at"]
    list_filter = ["upload_status", "mime_type"]
    search_fields = ["user__email", "original_filename", "file_path"]
    readonly_fields = ["created_at"]


@admin.register(StyleOption)
class StyleOptionAdmin(admin.ModelAdmin):
    """Admin for StyleOption model. Deactivating a style hides it from new jobs."""

    list_display = ["id", "name", "background_type", "is_active", "created_at"]
    list_filter = ["background_type", "is_active"]
    search_fields = ["name"]
    actions = ["activate", "deactivate"]

    def activate(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f"{count} styles activated")

    activate.short_description = "Activate selected styles"

    def deactivate(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f"{count} styles deactivated")

    deactivate.short_description = "Deactivate selected styles"


class GeneratedHeadshotInline(admin.TabularInline):
    model = GeneratedHeadshot
    extra = 0
    can_delete = False
    fields = ["style_option", "generation_status", "quality_score", "is_selected", "file_path", "error_message"]
    readonly_fields = fields


@admin.register(GenerationJob)
class GenerationJobAdmin(admin.ModelAdmin):
    """Admin for GenerationJob model."""

    list_display = ["id", "user", "status", "created_at", "completed_at"]
    list_filter = ["status", "created_at"]
    search_fields = ["user__email"]
    readonly_fields = ["user", "image_upload", "style_option_ids", "created_at", "completed_at"]
    date_hierarchy = "created_at"
    inlines = [GeneratedHeadshotInline]

    fieldsets = (
        (None, {"fields": ("user", "image_upload", "style_option_ids")}),
        ("Status", {"fields": ("status", "error_message")}),
        ("Timestamps", {"fields": ("created_at", "completed_at")}),
    )

    actions = ["mark_as_failed"]

    def mark_as_failed(self, request, queryset):
        """Mark selected jobs as failed through the manual status override."""
        count = 0
        for job in queryset:
            update_job_status(job.id, "failed", error_message="Marked as failed by an operator")
            count += 1
        self.message_user(request, f"{count} jobs marked as failed")

    mark_as_failed.short_description = "Mark selected jobs as failed"


@admin.register(GeneratedHeadshot)
class GeneratedHeadshotAdmin(admin.ModelAdmin):
    """Admin for GeneratedHeadshot model."""

    list_display = ["id", "generation_job", "style_option", "generation_status", "quality_score", "is_selected"]
    list_filter = ["generation_status", "is_selected"]
    search_fields = ["generation_job__user__email"]
    readonly_fields = ["created_at"]
