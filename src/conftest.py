"""
This conftest.py provides fixtures shared by all apps.
"""

import secrets
import string
import typing as t
from datetime import date
from decimal import Decimal

import faker
import pytest
from django.core.cache import cache
from django.test.client import Client
from ninja_jwt.tokens import RefreshToken

from accounts.models import ConferenceUser
from registrations.models import Address, Enrollment, Ticket, TicketType


@pytest.fixture(autouse=True)
def clear_cache() -> None:
    """Clear the cache before each test so throttling counters start from zero."""
    cache.clear()


class ConferenceUserFactory:
    """Factory for creating ConferenceUser instances for testing."""

    fake = faker.Faker()

    def create_user(self, **kwargs: t.Any) -> ConferenceUser:
        username = kwargs.pop(
            "username", "".join(secrets.choice(string.ascii_lowercase) for _ in range(8)) + "@user.test"
        )
        email = kwargs.pop("email", username + ("@test.com" if "@" not in username else ""))
        password = kwargs.pop("password", "password")
        first_name = kwargs.pop("first_name", self.fake.first_name())
        last_name = kwargs.pop("last_name", self.fake.last_name())
        return ConferenceUser.objects.create_user(
            username=username,
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            **kwargs,
        )

    def __call__(self, **kwargs: t.Any) -> ConferenceUser:
        return self.create_user(**kwargs)


@pytest.fixture
def conference_user_factory() -> ConferenceUserFactory:
    return ConferenceUserFactory()


@pytest.fixture
def user(conference_user_factory: ConferenceUserFactory) -> ConferenceUser:
    """A standard, non-privileged user."""
    return conference_user_factory(username="attendee@example.com")


@pytest.fixture
def superuser(conference_user_factory: ConferenceUserFactory) -> ConferenceUser:
    """A superuser."""
    return conference_user_factory(is_superuser=True, is_staff=True)


@pytest.fixture
def auth_client(user: ConferenceUser) -> Client:
    """API client authenticated as ``user``."""
    refresh = RefreshToken.for_user(user)
    return Client(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")  # type: ignore[attr-defined]


class EnrollmentFactory:
    """Factory for creating Enrollment instances with plausible personal data."""

    fake = faker.Faker("pt_BR")

    def __call__(self, user: ConferenceUser, **kwargs: t.Any) -> Enrollment:
        kwargs.setdefault("name", self.fake.name())
        kwargs.setdefault("cpf", self.fake.numerify("###########"))
        kwargs.setdefault("birthday", date(1990, 5, 17))
        kwargs.setdefault("phone", "(21) 98999-9999")
        return Enrollment.objects.create(user=user, **kwargs)


@pytest.fixture
def enrollment_factory() -> EnrollmentFactory:
    return EnrollmentFactory()


@pytest.fixture
def enrollment(user: ConferenceUser, enrollment_factory: EnrollmentFactory) -> Enrollment:
    """An enrollment for ``user``."""
    return enrollment_factory(user)


@pytest.fixture
def address(enrollment: Enrollment) -> Address:
    return Address.objects.create(
        enrollment=enrollment,
        cep="22041-001",
        street="Avenida Atlântica",
        city="Rio de Janeiro",
        state="RJ",
        number="1702",
        neighborhood="Copacabana",
    )


@pytest.fixture
def remote_ticket_type() -> TicketType:
    """A remote ticket type (never includes accommodation in practice)."""
    return TicketType.objects.create(name="Online", price=Decimal("100.00"), is_remote=True, includes_hotel=False)


@pytest.fixture
def in_person_ticket_type() -> TicketType:
    """An in-person ticket type without accommodation."""
    return TicketType.objects.create(name="In person", price=Decimal("250.00"), is_remote=False, includes_hotel=False)


@pytest.fixture
def hotel_ticket_type() -> TicketType:
    """An in-person ticket type that includes accommodation."""
    return TicketType.objects.create(
        name="In person + Hotel", price=Decimal("600.00"), is_remote=False, includes_hotel=True
    )


@pytest.fixture
def paid_hotel_ticket(enrollment: Enrollment, hotel_ticket_type: TicketType) -> Ticket:
    """A paid ticket that grants hotel access to ``user``."""
    return Ticket.objects.create(enrollment=enrollment, ticket_type=hotel_ticket_type, status=Ticket.TicketStatus.PAID)
