"""Serializers for article creation and article/profile output."""

from rest_framework import serializers

from store import Article


class ArticleCreateSerializer(serializers.Serializer):
    """Require a non-blank title for new articles."""

    title = serializers.CharField(max_length=255)

    def to_article(self) -> Article:
        return Article(title=self.validated_data["title"])


class ProfileSerializer(serializers.Serializer):
    """Public author profile embedded in articles."""

    username = serializers.CharField(read_only=True)
    bio = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)


class ArticleSerializer(serializers.Serializer):
    """Article output with its author profile, or null when it has none."""

    slug = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    author = ProfileSerializer(read_only=True, allow_null=True)


__all__ = ["ArticleCreateSerializer", "ArticleSerializer", "ProfileSerializer"]
