import typing as t

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Prefetch

from common.models import TimeStampedModel


class HotelQuerySet(models.QuerySet["Hotel"]):
    def with_rooms(self) -> t.Self:
        """Prefetch the hotel's rooms, ordered by name."""
        return self.prefetch_related(Prefetch("rooms", queryset=Room.objects.order_by("name")))


class HotelManager(models.Manager["Hotel"]):
    def get_queryset(self) -> HotelQuerySet:
        """Get base queryset."""
        return HotelQuerySet(self.model, using=self._db)

    def with_rooms(self) -> HotelQuerySet:
        """Returns a queryset with rooms prefetched."""
        return self.get_queryset().with_rooms()


class Hotel(TimeStampedModel):
    name = models.CharField(max_length=255, db_index=True)
    image = models.URLField(max_length=500)

    objects = HotelManager()

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:  # pragma: no cover
        return self.name


class Room(TimeStampedModel):
    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    name = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        ordering = ["hotel", "name"]
        constraints = [
            models.UniqueConstraint(fields=["hotel", "name"], name="unique_room_name_per_hotel"),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.hotel.name} - {self.name}"
