import pytest

from hotels.models import Hotel


@pytest.fixture
def hotel() -> Hotel:
    return Hotel.objects.create(name="Seaside Resort", image="https://images.example.com/hotels/seaside-resort.jpg")
