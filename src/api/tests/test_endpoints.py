"""Tests for the service-level endpoints: version, healthcheck and token issuing."""

import pytest
from django.conf import settings
from django.test.client import Client
from django.urls import reverse

from accounts.models import ConferenceUser
from hotels.models import Hotel
from registrations.models import Ticket

pytestmark = pytest.mark.django_db


def test_version(client: Client) -> None:
    response = client.get(reverse("api:version"))

    assert response.status_code == 200
    assert response.json() == {"version": settings.VERSION}


def test_healthcheck(client: Client) -> None:
    response = client.get(reverse("api:healthcheck"))

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestTokenPair:
    def test_obtain_token_pair(self, client: Client, user: ConferenceUser) -> None:
        response = client.post(
            reverse("api:token_obtain_pair"),
            data={"username": user.username, "password": "password"},
            content_type="application/json",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["access"]
        assert data["refresh"]

    def test_wrong_password_is_rejected(self, client: Client, user: ConferenceUser) -> None:
        response = client.post(
            reverse("api:token_obtain_pair"),
            data={"username": user.username, "password": "wrong"},
            content_type="application/json",
        )

        assert response.status_code == 401

    def test_issued_token_grants_access_to_hotels(
        self, client: Client, user: ConferenceUser, paid_hotel_ticket: Ticket, hotel: Hotel
    ) -> None:
        token_response = client.post(
            reverse("api:token_obtain_pair"),
            data={"username": user.username, "password": "password"},
            content_type="application/json",
        )
        access = token_response.json()["access"]

        response = client.get(reverse("api:list_hotels"), HTTP_AUTHORIZATION=f"Bearer {access}")

        assert response.status_code == 200
        assert response.json()[0]["name"] == hotel.name
