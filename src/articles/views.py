"""Article endpoints: read by slug and create as the current user."""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema, inline_serializer

from core.exceptions import NotFoundError
from core.response import BaseAPIView, api_response
from core.validation import validate_payload

from .serializers import ArticleCreateSerializer, ArticleSerializer

logger = logging.getLogger(__name__)

ARTICLE_RESPONSE = inline_serializer(name="ArticleResponse", fields={"article": ArticleSerializer()})


class ArticleCreateView(BaseAPIView):
    requires_auth = True

    @extend_schema(
        request=inline_serializer(name="ArticleCreateRequest", fields={"article": ArticleCreateSerializer()}),
        responses={200: ARTICLE_RESPONSE, 422: OpenApiResponse(description="Missing title or duplicate slug")},
    )
    def post(self, request):
        """Create an article authored by the token's user."""
        serializer = validate_payload(request, "article", ArticleCreateSerializer)
        try:
            author_id = self.store.get_user(request.user.login).id
        except NotFoundError:
            logger.warning("Author %r not found, creating article without author", request.user.login)
            author_id = None
        article = self.store.create_article(serializer.to_article(), author_id)
        return api_response("article", ArticleSerializer(article).data)


class ArticleDetailView(BaseAPIView):
    @extend_schema(responses={200: ARTICLE_RESPONSE, 404: OpenApiResponse(description="No article with this slug")})
    def get(self, request, slug: str):
        """Return a single article by slug."""
        article = self.store.get_article(slug)
        return api_response("article", ArticleSerializer(article).data)


__all__ = ["ArticleCreateView", "ArticleDetailView"]
