from django.apps import AppConfig


class HotelsConfig(AppConfig):
    """Configuration for the hotels app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "hotels"
    verbose_name = "Hotels"
