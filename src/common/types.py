"""Common types."""

from django.http import HttpRequest as DjangoHttpRequest

from accounts.models import ConferenceUser


class HttpRequest(DjangoHttpRequest):
    user: ConferenceUser
