"""Shared helpers for tests (users, auth headers, response assertions)."""

from __future__ import annotations

from authentication.services import AuthData, get_token_service
from store import User, get_blog_store


def auth_header(login: str) -> str:
    """Return an ``Authorization`` value carrying a fresh token for ``login``."""

    service = get_token_service()
    return f"{service.scheme} {service.issue_token(AuthData(login=login))}"


def create_user(login: str, password: str = "123", store=None, **extra) -> User:
    """Register a user directly through the store, bypassing the API."""

    store = store or get_blog_store()
    return store.registration(User(login=login, password=password, **extra))


def assert_json(testcase, response, status: int = 200) -> dict:
    """Assert status and JSON content type, then return the decoded body."""

    testcase.assertEqual(response.status_code, status, response.content)
    testcase.assertTrue(response["Content-Type"].startswith("application/json"))
    return response.json()


def assert_422(testcase, response) -> list[str]:
    """Assert a 422 carrying a non-empty ``errors.body`` list and return it."""

    body = assert_json(testcase, response, 422)
    errors = body["errors"]["body"]
    testcase.assertTrue(errors, "expected entries in the 422 error list")
    return errors


def assert_required_fields(testcase, errors: list[str], required: list[str]) -> None:
    """Every required field must be named (case-insensitively) by some error."""

    missing = [
        field for field in required
        if not any(field.lower() in message.lower() for message in errors)
    ]
    testcase.assertFalse(missing, f"fields {missing} not reported in {errors}")
