import pytest

from hotels.models import Hotel, Room


@pytest.fixture
def hotel() -> Hotel:
    return Hotel.objects.create(name="Seaside Resort", image="https://images.example.com/hotels/seaside.jpg")


@pytest.fixture
def other_hotel() -> Hotel:
    return Hotel.objects.create(name="Downtown Palace", image="https://images.example.com/hotels/palace.jpg")


@pytest.fixture
def rooms(hotel: Hotel) -> list[Room]:
    return [
        Room.objects.create(hotel=hotel, name="102", capacity=2),
        Room.objects.create(hotel=hotel, name="101", capacity=1),
    ]
