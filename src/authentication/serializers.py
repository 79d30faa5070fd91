"""Serializers for user flows (registration, login, profile update, output)."""

from rest_framework import serializers

from store import User, UserUpdate


class RegistrationSerializer(serializers.Serializer):
    """Require username, email and password to create a user."""

    username = serializers.CharField(max_length=150)
    email = serializers.CharField(max_length=254)
    password = serializers.CharField(max_length=128, write_only=True, trim_whitespace=False)

    def to_user(self) -> User:
        data = self.validated_data
        return User(login=data["username"], email=data["email"], password=data["password"])


class LoginSerializer(serializers.Serializer):
    """Require username and password for authentication."""

    username = serializers.CharField(max_length=150)
    password = serializers.CharField(max_length=128, write_only=True, trim_whitespace=False)


class UserUpdateSerializer(serializers.Serializer):
    """Sparse profile update: every field is optional.

    Blank values are written as-is, except for ``username``, which must stay
    a usable login.

    Fields left out of the payload (or sent as ``null``) stay ``None`` in the
    resulting ``UserUpdate`` and are not written.
    """

    username = serializers.CharField(max_length=150, required=False, allow_null=True)
    email = serializers.CharField(max_length=254, required=False, allow_null=True, allow_blank=True)
    password = serializers.CharField(
        max_length=128, required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    bio = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    image = serializers.CharField(max_length=512, required=False, allow_null=True, allow_blank=True)

    def to_update(self) -> UserUpdate:
        return UserUpdate(**self.validated_data)


class UserSerializer(serializers.Serializer):
    """Current-user payload; the token is passed through serializer context."""

    username = serializers.CharField(source="login", read_only=True)
    email = serializers.CharField(read_only=True)
    bio = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)
    token = serializers.SerializerMethodField()

    def get_token(self, obj: User) -> str:
        return self.context.get("token", "")


__all__ = ["LoginSerializer", "RegistrationSerializer", "UserSerializer", "UserUpdateSerializer"]
