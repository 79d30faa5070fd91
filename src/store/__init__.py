"""Article/user stores and the startup-time selection between them."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base import BlogStore
from .entities import Article, Profile, User, UserUpdate

_store: BlogStore | None = None


def build_store(backend: str) -> BlogStore:
    """Instantiate the store implementation named by ``backend``."""

    if backend == "database":
        from .database import DatabaseBlogStore

        return DatabaseBlogStore()
    if backend == "memory":
        from .memory import InMemoryBlogStore

        return InMemoryBlogStore()
    raise ImproperlyConfigured(f"Unknown BLOG_STORE backend: {backend!r}")


def get_blog_store() -> BlogStore:
    """Return the process-wide store selected by ``settings.BLOG_STORE``."""

    global _store
    if _store is None:
        _store = build_store(settings.BLOG_STORE)
    return _store


__all__ = ["Article", "BlogStore", "Profile", "User", "UserUpdate", "build_store", "get_blog_store"]
