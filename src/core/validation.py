"""Request body decoding shared by the write endpoints."""

from typing import Any

from rest_framework import exceptions, serializers

from .exceptions import MSG_INVALID_BODY


def read_payload(request, key: str) -> dict[str, Any]:
    """Parse the JSON body and return the object wrapped under ``key``.

    Malformed JSON, an empty body, a non-JSON content type, or a non-object
    document raise a single ``invalid json body`` error. A missing wrapper
    counts as an empty object so the field validators report every required
    field.
    """

    # DRF parses an empty stream as {}.
    if request.stream is None:
        raise serializers.ValidationError([MSG_INVALID_BODY])

    try:
        document = request.data
    except (exceptions.ParseError, exceptions.UnsupportedMediaType) as exc:
        raise serializers.ValidationError([MSG_INVALID_BODY]) from exc

    if not isinstance(document, dict):
        raise serializers.ValidationError([MSG_INVALID_BODY])

    payload = document.get(key)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise serializers.ValidationError([MSG_INVALID_BODY])
    return payload


def validate_payload(request, key: str, serializer_class: type[serializers.Serializer]) -> serializers.Serializer:
    """Run ``serializer_class`` over the wrapped payload, collecting all errors."""

    serializer = serializer_class(data=read_payload(request, key))
    serializer.is_valid(raise_exception=True)
    return serializer


__all__ = ["read_payload", "validate_payload"]
