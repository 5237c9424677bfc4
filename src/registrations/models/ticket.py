import typing as t
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from common.models import TimeStampedModel

from .enrollment import Enrollment


class TicketType(TimeStampedModel):
    """A category of ticket, defining what it entitles its holder to."""

    name = models.CharField(max_length=255, db_index=True)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0.00"), validators=[MinValueValidator(Decimal("0.00"))]
    )
    is_remote = models.BooleanField(default=False, help_text="Remote tickets give access to the online stream only.")
    includes_hotel = models.BooleanField(default=False, help_text="Whether the ticket includes accommodation.")

    class Meta:
        ordering = ["price", "name"]

    def __str__(self) -> str:  # pragma: no cover
        return self.name


class TicketQuerySet(models.QuerySet["Ticket"]):
    """Custom queryset for Ticket model with common prefetch patterns."""

    def with_ticket_type(self) -> t.Self:
        """Select the related ticket type."""
        return self.select_related("ticket_type")


class TicketManager(models.Manager["Ticket"]):
    """Custom manager for Ticket with convenience methods for related object selection."""

    def get_queryset(self) -> TicketQuerySet:
        """Get base queryset."""
        return TicketQuerySet(self.model, using=self._db)

    def with_ticket_type(self) -> TicketQuerySet:
        """Returns a queryset with the ticket type selected."""
        return self.get_queryset().with_ticket_type()


class Ticket(TimeStampedModel):
    """The ticket bought (or reserved) for an enrollment."""

    class TicketStatus(models.TextChoices):
        RESERVED = "RESERVED", "Reserved"
        PAID = "PAID", "Paid"

    enrollment = models.OneToOneField(Enrollment, on_delete=models.CASCADE, related_name="ticket")
    ticket_type = models.ForeignKey(TicketType, on_delete=models.PROTECT, related_name="tickets")
    status = models.CharField(
        max_length=20, choices=TicketStatus.choices, default=TicketStatus.RESERVED, db_index=True
    )

    objects = TicketManager()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.ticket_type.name} ticket for {self.enrollment.name} ({self.status})"
