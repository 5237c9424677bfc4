"""Hotel schemas."""

from ninja import ModelSchema

from hotels.models import Hotel, Room


class RoomSchema(ModelSchema):
    class Meta:
        model = Room
        fields = ("id", "name", "capacity", "created_at", "updated_at")


class HotelSchema(ModelSchema):
    class Meta:
        model = Hotel
        fields = ("id", "name", "image", "created_at", "updated_at")


class HotelWithRoomsSchema(ModelSchema):
    rooms: list[RoomSchema]

    class Meta:
        model = Hotel
        fields = ("id", "name", "image", "created_at", "updated_at")
