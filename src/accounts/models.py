import re
import uuid

from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models


class ConferenceUserQueryset(models.QuerySet["ConferenceUser"]):
    """Queryset for ConferenceUser."""

    def with_enrollment(self) -> "ConferenceUserQueryset":
        """Select the enrollment alongside the user."""
        return self.select_related("enrollment")


class ConferenceUserManager(UserManager["ConferenceUser"]):
    def get_queryset(self) -> ConferenceUserQueryset:
        """Get queryset for ConferenceUser."""
        return ConferenceUserQueryset(self.model, using=self._db)

    def with_enrollment(self) -> ConferenceUserQueryset:
        """Returns a queryset with the enrollment selected."""
        return self.get_queryset().with_enrollment()


class ConferenceUser(AbstractUser):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    preferred_name = models.CharField(db_index=True, max_length=255, blank=True, help_text="Preferred name")

    objects = ConferenceUserManager()  # type: ignore[misc]

    class Meta:
        ordering = ["username"]

    @property
    def display_name(self) -> str:
        """Display name."""
        return self.get_display_name()

    def get_display_name(self) -> str:
        """Returns the user's preferred name, or their full name as a fallback."""
        return (
            self.preferred_name or self.get_full_name() or re.sub(r"(\W|_)+", " ", self.username.split("@")[0]).title()
        )
