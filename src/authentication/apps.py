"""App configuration for authentication components."""

from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    """Authentication app holds the blog user table, tokens and user endpoints."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"
