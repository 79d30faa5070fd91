"""User endpoints: registration, login, and the current-user profile."""

import hmac
import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema, inline_serializer

from core.exceptions import NotFoundError
from core.response import BaseAPIView, api_response
from core.validation import validate_payload
from store import User

from .serializers import (
    LoginSerializer,
    RegistrationSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from .services import AuthData

logger = logging.getLogger(__name__)

USER_RESPONSE = inline_serializer(name="UserResponse", fields={"user": UserSerializer()})


def _user_response(user: User, token: str):
    return api_response("user", UserSerializer(user, context={"token": token}).data)


class RegistrationView(BaseAPIView):
    @extend_schema(
        request=inline_serializer(name="RegistrationRequest", fields={"user": RegistrationSerializer()}),
        responses={200: USER_RESPONSE, 422: OpenApiResponse(description="Missing fields or username taken")},
    )
    def post(self, request):
        """Register a new user and return it with a fresh token."""
        serializer = validate_payload(request, "user", RegistrationSerializer)
        user = self.store.registration(serializer.to_user())
        return _user_response(user, self.tokens.issue_token(AuthData(login=user.login)))


class LoginView(BaseAPIView):
    @extend_schema(
        request=inline_serializer(name="LoginRequest", fields={"user": LoginSerializer()}),
        responses={200: USER_RESPONSE, 404: OpenApiResponse(description="Unknown user or wrong password")},
    )
    def post(self, request):
        """Check credentials and issue a token."""
        serializer = validate_payload(request, "user", LoginSerializer)
        username = serializer.validated_data["username"]
        user = self.store.get_user(username)
        # Plain comparison: passwords are stored as opaque strings.
        if not hmac.compare_digest(user.password.encode(), serializer.validated_data["password"].encode()):
            logger.info("Failed login for %r", username)
            raise NotFoundError("invalid credentials")
        return _user_response(user, self.tokens.issue_token(AuthData(login=user.login)))


class CurrentUserView(BaseAPIView):
    requires_auth = True

    @extend_schema(responses={200: USER_RESPONSE, 404: OpenApiResponse(description="User no longer exists")})
    def get(self, request):
        """Return the user behind the bearer token, echoing that token."""
        user = self.store.get_user(request.user.login)
        return _user_response(user, request.auth)

    @extend_schema(
        request=inline_serializer(name="UserUpdateRequest", fields={"user": UserUpdateSerializer()}),
        responses={200: USER_RESPONSE, 404: OpenApiResponse(description="User no longer exists")},
    )
    def put(self, request):
        """Apply a sparse profile update and re-issue the token."""
        serializer = validate_payload(request, "user", UserUpdateSerializer)
        login = request.user.login
        self.store.get_user(login)
        user = self.store.update_user(login, serializer.to_update())
        if user.login != login:
            logger.info("User %r renamed to %r", login, user.login)
        return _user_response(user, self.tokens.issue_token(AuthData(login=user.login)))


__all__ = ["CurrentUserView", "LoginView", "RegistrationView"]
