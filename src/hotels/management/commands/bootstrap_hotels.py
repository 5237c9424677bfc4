"""Create the default ticket types and a handful of sample hotels."""

import typing as t
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from hotels.models import Hotel, Room
from registrations.models import TicketType

TICKET_TYPES: list[dict[str, t.Any]] = [
    {"name": "Online", "price": Decimal("100.00"), "is_remote": True, "includes_hotel": False},
    {"name": "In person", "price": Decimal("250.00"), "is_remote": False, "includes_hotel": False},
    {"name": "In person + Hotel", "price": Decimal("600.00"), "is_remote": False, "includes_hotel": True},
]

HOTELS: dict[str, dict[str, t.Any]] = {
    "Seaside Resort": {
        "image": "https://images.example.com/hotels/seaside-resort.jpg",
        "rooms": [("101", 1), ("102", 2), ("103", 3)],
    },
    "Downtown Palace": {
        "image": "https://images.example.com/hotels/downtown-palace.jpg",
        "rooms": [("201", 2), ("202", 2)],
    },
    "Harbour Inn": {
        "image": "https://images.example.com/hotels/harbour-inn.jpg",
        "rooms": [("301", 1), ("302", 3)],
    },
}


class Command(BaseCommand):
    help = "Create the default ticket types and sample hotels with rooms. Safe to run more than once."

    @transaction.atomic
    def handle(self, *args: t.Any, **kwargs: t.Any) -> None:
        """Create ticket types, hotels and rooms that do not exist yet."""
        for ticket_type in TICKET_TYPES:
            _obj, created = TicketType.objects.get_or_create(name=ticket_type["name"], defaults=ticket_type)
            if created:
                self.stdout.write(self.style.SUCCESS(f"Ticket type '{ticket_type['name']}' created."))

        for hotel_name, data in HOTELS.items():
            hotel, created = Hotel.objects.get_or_create(name=hotel_name, defaults={"image": data["image"]})
            if created:
                self.stdout.write(self.style.SUCCESS(f"Hotel '{hotel_name}' created."))
            for room_name, capacity in data["rooms"]:
                Room.objects.get_or_create(hotel=hotel, name=room_name, defaults={"capacity": capacity})

        self.stdout.write(self.style.SUCCESS("Hotels bootstrapped."))
