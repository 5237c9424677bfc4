"""test_models.py: Unit tests for the accounts models."""

import typing as t

import pytest

from accounts.models import ConferenceUser, ConferenceUserQueryset
from registrations.models import Enrollment

pytestmark = pytest.mark.django_db


def test_conferenceuser_manager_get_queryset() -> None:
    """Test that ConferenceUserManager.get_queryset() returns a ConferenceUserQueryset."""
    queryset = ConferenceUser.objects.get_queryset()
    assert isinstance(queryset, ConferenceUserQueryset)


def test_conferenceuser_get_display_name_with_preferred_name() -> None:
    """Test that get_display_name() returns preferred_name when available."""
    user = ConferenceUser.objects.create_user(
        username="test_user", first_name="John", last_name="Doe", preferred_name="Johnny", password="password"
    )
    assert user.get_display_name() == "Johnny"


def test_conferenceuser_get_display_name_without_preferred_name() -> None:
    """Test that get_display_name() returns full name when preferred_name is not set."""
    user = ConferenceUser.objects.create_user(
        username="test_user", first_name="John", last_name="Doe", password="password"
    )
    assert user.get_display_name() == "John Doe"


def test_conferenceuser_get_display_name_falls_back_to_username() -> None:
    """Test that get_display_name() derives a name from the username as a last resort."""
    user = ConferenceUser.objects.create_user(username="jane_doe@example.com", password="password")
    assert user.display_name == "Jane Doe"


def test_with_enrollment_selects_enrollment(
    user: ConferenceUser, enrollment: Enrollment, django_assert_num_queries: t.Any
) -> None:
    """Test that with_enrollment() loads the enrollment in the same query."""
    with django_assert_num_queries(1):
        loaded = ConferenceUser.objects.with_enrollment().get(pk=user.pk)
        assert loaded.enrollment == enrollment
