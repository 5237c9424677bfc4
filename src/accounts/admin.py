"""Admin interface for the accounts app."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.db.models import QuerySet
from django.http import HttpRequest

from accounts.models import ConferenceUser


@admin.register(ConferenceUser)
class ConferenceUserAdmin(UserAdmin):  # type: ignore[type-arg]
    """Admin for conference users, showing whether they enrolled."""

    list_display = ["username", "email", "display_name", "has_enrollment", "is_staff", "is_active"]
    search_fields = ["username", "email", "first_name", "last_name", "preferred_name"]
    fieldsets = (
        *UserAdmin.fieldsets,  # type: ignore[misc]
        ("Profile", {"fields": ("preferred_name",)}),
    )

    def get_queryset(self, request: HttpRequest) -> QuerySet[ConferenceUser]:
        """Join the enrollment to avoid one query per row."""
        return super().get_queryset(request).select_related("enrollment")

    @admin.display(boolean=True, description="Enrolled")
    def has_enrollment(self, obj: ConferenceUser) -> bool:
        """Whether the user has an enrollment."""
        return hasattr(obj, "enrollment")
