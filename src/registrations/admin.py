"""Admin interface for enrollments and tickets."""

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from hotels.service.eligibility import ticket_shortcoming
from registrations.models import Address, Enrollment, Ticket, TicketType


class AddressInline(admin.StackedInline):  # type: ignore[type-arg]
    model = Address
    extra = 0
    can_delete = False


class TicketInline(admin.TabularInline):  # type: ignore[type-arg]
    model = Ticket
    extra = 0
    fields = ["ticket_type", "status"]


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "user", "cpf", "phone", "created_at"]
    search_fields = ["name", "cpf", "user__username", "user__email"]
    autocomplete_fields = ["user"]
    inlines = [AddressInline, TicketInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "price", "is_remote", "includes_hotel"]
    list_filter = ["is_remote", "includes_hotel"]
    search_fields = ["name"]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["enrollment", "ticket_type", "status", "grants_hotel_access", "created_at"]
    list_filter = ["status", "ticket_type"]
    search_fields = ["enrollment__name", "enrollment__user__username"]
    autocomplete_fields = ["enrollment"]

    def get_queryset(self, request: HttpRequest) -> QuerySet[Ticket]:
        """Join enrollment and ticket type for the list view."""
        return super().get_queryset(request).select_related("enrollment", "ticket_type")

    @admin.display(boolean=True, description="Hotel access")
    def grants_hotel_access(self, obj: Ticket) -> bool:
        """Whether this ticket lets its holder browse hotels."""
        return ticket_shortcoming(obj) is None
