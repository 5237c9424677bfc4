import typing as t
import uuid

import pytest

from accounts.models import ConferenceUser
from registrations.models import Address, Enrollment, Ticket
from registrations.service import DatabaseRegistrationLookup, find_enrollment_by_user, find_ticket_by_enrollment

pytestmark = pytest.mark.django_db


class TestFindEnrollmentByUser:
    def test_returns_none_for_user_without_enrollment(self, user: ConferenceUser) -> None:
        assert find_enrollment_by_user(user.id) is None

    def test_returns_none_for_unknown_user(self) -> None:
        assert find_enrollment_by_user(uuid.uuid4()) is None

    def test_returns_enrollment_with_address(
        self, user: ConferenceUser, enrollment: Enrollment, address: Address, django_assert_num_queries: t.Any
    ) -> None:
        with django_assert_num_queries(1):
            result = find_enrollment_by_user(user.id)
            assert result is not None
            assert result.address.city == "Rio de Janeiro"

        assert result == enrollment

    def test_returns_enrollment_without_address(self, user: ConferenceUser, enrollment: Enrollment) -> None:
        result = find_enrollment_by_user(user.id)

        assert result == enrollment
        assert not hasattr(result, "address")


class TestFindTicketByEnrollment:
    def test_returns_none_without_ticket(self, enrollment: Enrollment) -> None:
        assert find_ticket_by_enrollment(enrollment.id) is None

    def test_returns_ticket_with_ticket_type(
        self, enrollment: Enrollment, paid_hotel_ticket: Ticket, django_assert_num_queries: t.Any
    ) -> None:
        with django_assert_num_queries(1):
            result = find_ticket_by_enrollment(enrollment.id)
            assert result is not None
            assert result.ticket_type.includes_hotel is True

        assert result == paid_hotel_ticket


def test_database_lookup_delegates_to_module_functions(
    user: ConferenceUser, enrollment: Enrollment, paid_hotel_ticket: Ticket
) -> None:
    lookup = DatabaseRegistrationLookup()

    assert lookup.find_enrollment_by_user(user.id) == enrollment
    assert lookup.find_ticket_by_enrollment(enrollment.id) == paid_hotel_ticket
