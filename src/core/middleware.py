"""Middleware gating protected routes behind a valid bearer token."""

import logging

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin
from rest_framework import status

from authentication.services import AuthError, get_token_service

from .exceptions import MSG_UNAUTHORIZED, error_body

logger = logging.getLogger(__name__)


class TokenAuthMiddleware(MiddlewareMixin):
    """Verify the Authorization token for views flagged ``requires_auth``.

    Public views are left alone, so a stale or malformed header never blocks
    them. On success the claims and raw token are attached to the request for
    ``MiddlewareUserAuthentication`` to hand over to DRF.
    """

    def process_view(self, request, view_func, view_args, view_kwargs):  # type: ignore[override]
        view_class = getattr(view_func, "view_class", None)
        if not getattr(view_class, "requires_auth", False):
            return None

        service = get_token_service()
        try:
            token = service.token_from_header(request.META.get("HTTP_AUTHORIZATION", ""))
            if token is None:
                logger.info("Rejected %s %s: no token", request.method, request.path)
                return _unauthorized()
            auth_data = service.parse_token(token)
        except AuthError as exc:
            logger.info("Rejected %s %s: %s", request.method, request.path, exc)
            return _unauthorized()

        request.auth_data = auth_data
        request.auth_token = token
        return None


def _unauthorized() -> JsonResponse:
    return JsonResponse(error_body([MSG_UNAUTHORIZED]), status=status.HTTP_401_UNAUTHORIZED)


__all__ = ["TokenAuthMiddleware"]
