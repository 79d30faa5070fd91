"""Authentication helpers that bridge the token middleware into DRF.

``TokenAuthMiddleware`` verifies bearer tokens on protected routes and stores
the claims on the Django request. This module surfaces those claims as DRF's
``request.user`` (an ``AuthData``) and the raw token as ``request.auth``.
"""

from typing import Any, Optional, Tuple

from rest_framework.authentication import BaseAuthentication

from authentication.services import get_token_service


class MiddlewareUserAuthentication(BaseAuthentication):
    """Expose ``request._request.auth_data`` (set by middleware) to DRF.

    No credential parsing happens here. Requests without verified claims stay
    anonymous.
    """

    def authenticate(self, request) -> Optional[Tuple[Any, Optional[str]]]:
        # DRF's Request wraps the original Django HttpRequest as ``._request``.
        django_request = getattr(request, "_request", None)
        if django_request is None:
            return None

        auth_data = getattr(django_request, "auth_data", None)
        if auth_data is None:
            return None

        return auth_data, getattr(django_request, "auth_token", None)

    def authenticate_header(self, request) -> str:
        return get_token_service().scheme


__all__ = ["MiddlewareUserAuthentication"]
