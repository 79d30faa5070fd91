"""Helpers for article identifiers."""


def create_slug(title: str) -> str:
    """Lower-case the title and join its words with hyphens."""
    return "-".join(title.split()).lower()


__all__ = ["create_slug"]
