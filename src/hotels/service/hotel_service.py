"""Service layer for reading hotels and their rooms."""

from uuid import UUID

from django.db.models import QuerySet
from django.utils.translation import gettext as _

from hotels import models
from hotels.service.eligibility import NotFoundError, Reasons


def list_hotels() -> QuerySet[models.Hotel]:
    """Return all hotels ordered by name.

    Raises:
        NotFoundError: if no hotel has been registered yet.
    """
    hotels = models.Hotel.objects.order_by("name")
    if not hotels.exists():
        raise NotFoundError(_(Reasons.NO_HOTELS))
    return hotels


def get_hotel_with_rooms(hotel_id: UUID) -> models.Hotel:
    """Return a hotel with its rooms prefetched.

    Raises:
        NotFoundError: if the hotel does not exist.
    """
    try:
        return models.Hotel.objects.with_rooms().get(pk=hotel_id)
    except models.Hotel.DoesNotExist:
        raise NotFoundError(_(Reasons.HOTEL_NOT_FOUND))
