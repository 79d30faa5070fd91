"""App configuration for articles."""

from django.apps import AppConfig


class ArticlesConfig(AppConfig):
    """Articles app holds the article table and its endpoints."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "articles"
