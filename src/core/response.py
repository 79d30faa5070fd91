"""Response helpers and the base view shared by blog endpoints."""

from typing import Any

from django.http import HttpResponse, JsonResponse
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.services import TokenService, get_token_service
from store import BlogStore, get_blog_store

from .exceptions import error_body


def api_response(key: str, data: Any, status: int = 200) -> Response:
    """Return ``data`` wrapped under ``key``, e.g. ``{"article": {...}}``."""

    return Response({key: data}, status=status)


class BaseAPIView(APIView):
    """APIView wired to the configured blog store and token service.

    Set ``requires_auth = True`` to have ``TokenAuthMiddleware`` reject
    requests without a valid bearer token before the handler runs.
    """

    requires_auth = False

    @property
    def store(self) -> BlogStore:
        return get_blog_store()

    @property
    def tokens(self) -> TokenService:
        return get_token_service()


def not_found(request, exception=None) -> HttpResponse:
    """``handler404``: unmatched routes answer with an empty body."""

    return HttpResponse(status=404)


def server_error(request) -> JsonResponse:
    """``handler500``: keep the error envelope for unexpected failures."""

    return JsonResponse(error_body(["internal server error"]), status=500)


__all__ = ["BaseAPIView", "api_response", "not_found", "server_error"]
