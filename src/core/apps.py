"""App configuration for the core project utilities."""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Core app holds shared settings, URLs, middleware and error handling."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Register the OpenAPI auth extension and select the blog store."""
        from store import get_blog_store

        from . import schema  # noqa: F401

        store = get_blog_store()
        logger.info("Blog store backend %r (%s)", settings.BLOG_STORE, type(store).__name__)
