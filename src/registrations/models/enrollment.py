import typing as t

from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models

from common.models import TimeStampedModel

cpf_validator = RegexValidator(r"^\d{11}$", "CPF must contain exactly 11 digits.")
cep_validator = RegexValidator(r"^\d{5}-?\d{3}$", "CEP must be in the format 00000-000.")


class EnrollmentQuerySet(models.QuerySet["Enrollment"]):
    def with_address(self) -> t.Self:
        """Select the related address."""
        return self.select_related("address")


class EnrollmentManager(models.Manager["Enrollment"]):
    def get_queryset(self) -> EnrollmentQuerySet:
        """Get base queryset."""
        return EnrollmentQuerySet(self.model, using=self._db)

    def with_address(self) -> EnrollmentQuerySet:
        """Returns a queryset with the address selected."""
        return self.get_queryset().with_address()


class Enrollment(TimeStampedModel):
    """A user's registration for the conference."""

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment")
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=11, unique=True, validators=[cpf_validator])
    birthday = models.DateField()
    phone = models.CharField(max_length=20)

    objects = EnrollmentManager()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover
        return f"Enrollment of {self.name}"


class Address(TimeStampedModel):
    enrollment = models.OneToOneField(Enrollment, on_delete=models.CASCADE, related_name="address")
    cep = models.CharField(max_length=9, validators=[cep_validator])
    street = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=2)
    number = models.CharField(max_length=20)
    neighborhood = models.CharField(max_length=255)
    address_detail = models.CharField(max_length=255, blank=True)

    class Meta:
        verbose_name_plural = "addresses"

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.street}, {self.number} - {self.city}/{self.state}"
