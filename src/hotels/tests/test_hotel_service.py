import typing as t
import uuid

import pytest

from hotels.models import Hotel, Room
from hotels.service import hotel_service
from hotels.service.eligibility import NotFoundError, Reasons

pytestmark = pytest.mark.django_db


class TestListHotels:
    def test_returns_hotels_ordered_by_name(self, hotel: Hotel, other_hotel: Hotel) -> None:
        hotels = list(hotel_service.list_hotels())

        assert hotels == [other_hotel, hotel]

    def test_raises_not_found_when_there_are_no_hotels(self) -> None:
        with pytest.raises(NotFoundError, match=str(Reasons.NO_HOTELS)):
            hotel_service.list_hotels()


class TestGetHotelWithRooms:
    def test_returns_hotel_with_rooms_ordered_by_name(self, hotel: Hotel, rooms: list[Room]) -> None:
        result = hotel_service.get_hotel_with_rooms(hotel.id)

        assert result == hotel
        assert [room.name for room in result.rooms.all()] == ["101", "102"]

    def test_rooms_are_prefetched(self, hotel: Hotel, rooms: list[Room], django_assert_num_queries: t.Any) -> None:
        with django_assert_num_queries(2):
            result = hotel_service.get_hotel_with_rooms(hotel.id)
            list(result.rooms.all())

    def test_does_not_include_rooms_of_other_hotels(self, hotel: Hotel, other_hotel: Hotel, rooms: list[Room]) -> None:
        Room.objects.create(hotel=other_hotel, name="201", capacity=4)

        result = hotel_service.get_hotel_with_rooms(hotel.id)

        assert {room.name for room in result.rooms.all()} == {"101", "102"}

    def test_raises_not_found_for_unknown_hotel(self) -> None:
        with pytest.raises(NotFoundError, match=str(Reasons.HOTEL_NOT_FOUND)):
            hotel_service.get_hotel_with_rooms(uuid.uuid4())
