"""test_models.py: Unit tests for the registrations models."""

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from accounts.models import ConferenceUser
from conftest import EnrollmentFactory
from registrations.models import Enrollment, Ticket, TicketType

pytestmark = pytest.mark.django_db


def test_ticket_defaults_to_reserved(enrollment: Enrollment, hotel_ticket_type: TicketType) -> None:
    ticket = Ticket.objects.create(enrollment=enrollment, ticket_type=hotel_ticket_type)

    assert ticket.status == Ticket.TicketStatus.RESERVED


def test_enrollment_can_only_have_one_ticket(paid_hotel_ticket: Ticket, remote_ticket_type: TicketType) -> None:
    with pytest.raises(ValidationError):
        Ticket.objects.create(enrollment=paid_hotel_ticket.enrollment, ticket_type=remote_ticket_type)


def test_user_can_only_enroll_once(
    user: ConferenceUser, enrollment: Enrollment, enrollment_factory: EnrollmentFactory
) -> None:
    with pytest.raises(ValidationError):
        enrollment_factory(user)


@pytest.mark.parametrize("cpf", ["123", "1234567890a", "123456789012"])
def test_enrollment_rejects_invalid_cpf(user: ConferenceUser, enrollment_factory: EnrollmentFactory, cpf: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        enrollment_factory(user, cpf=cpf)

    assert "cpf" in exc_info.value.message_dict


def test_ticket_type_price_cannot_be_negative() -> None:
    with pytest.raises(ValidationError):
        TicketType.objects.create(name="Broken", price=Decimal("-1.00"))
