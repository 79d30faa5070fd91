"""Blog user record stored in the ``usr`` table.

Passwords are opaque strings compared by equality; no hashing is applied.
"""

from django.db import models


class User(models.Model):
    """Registered author identified by a unique login."""

    login = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=128, blank=True, default="")
    email = models.CharField(max_length=254, blank=True, default="")
    bio = models.TextField(blank=True, default="")
    image = models.CharField(max_length=512, blank=True, default="")

    class Meta:
        db_table = "usr"
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.login


__all__ = ["User"]
