"""Admin interface for hotels and rooms."""

from django.contrib import admin
from django.db.models import Count, QuerySet
from django.http import HttpRequest

from hotels.models import Hotel, Room


class RoomInline(admin.TabularInline):  # type: ignore[type-arg]
    model = Room
    extra = 1
    fields = ["name", "capacity"]


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "room_count", "created_at"]
    search_fields = ["name"]
    inlines = [RoomInline]

    def get_queryset(self, request: HttpRequest) -> QuerySet[Hotel]:
        """Annotate the number of rooms."""
        return super().get_queryset(request).annotate(room_count=Count("rooms"))

    @admin.display(description="Rooms", ordering="room_count")
    def room_count(self, obj: Hotel) -> int:
        """Number of rooms in the hotel."""
        return obj.room_count  # type: ignore[attr-defined,no-any-return]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "hotel", "capacity"]
    list_filter = ["hotel"]
    search_fields = ["name", "hotel__name"]
