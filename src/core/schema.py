"""OpenAPI description of the token authentication used by the API."""

from drf_spectacular.extensions import OpenApiAuthenticationExtension

from authentication.services import get_token_service


class MiddlewareTokenScheme(OpenApiAuthenticationExtension):
    """Describe ``Authorization: <scheme> <jwt>`` for protected operations."""

    target_class = "core.authentication.MiddlewareUserAuthentication"
    name = "tokenAuth"

    def get_security_definition(self, auto_schema):
        return {
            "type": "apiKey",
            "in": "header",
            "name": "Authorization",
            "description": f"JWT prefixed with the scheme, e.g. `{get_token_service().scheme} <token>`.",
        }


__all__ = ["MiddlewareTokenScheme"]
