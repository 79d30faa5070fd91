"""Article stored in the ``article`` table with an optional author."""

from django.db import models


class Article(models.Model):
    """Blog article addressed by its unique slug."""

    slug = models.SlugField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    author = models.ForeignKey(
        "authentication.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="articles",
    )

    class Meta:
        db_table = "article"
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title


__all__ = ["Article"]
