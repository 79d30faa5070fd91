"""Article endpoints and slug generation."""

from __future__ import annotations

from datetime import timedelta
from unittest import mock

from django.conf import settings
from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient

from articles.models import Article as ArticleModel
from articles.utils import create_slug
from authentication.services import AuthData, TokenService, get_token_service
from core.exceptions import StoreError
from store import Article, get_blog_store
from store.database import DatabaseBlogStore
from tests.utils import assert_422, assert_json, assert_required_fields, auth_header, create_user


class CreateSlugTests(SimpleTestCase):
    def test_slug_cases(self):
        cases = {
            "test": "test",
            "test article": "test-article",
            "   test": "test",
            "test    ": "test",
            "   test   article   ": "test-article",
            "TEST ARTICLE": "test-article",
            "  Test   Article  ": "test-article",
        }
        for title, slug in cases.items():
            with self.subTest(title=title):
                self.assertEqual(create_slug(title), slug)

    def test_idempotent_on_normalized_input(self):
        self.assertEqual(create_slug(create_slug("My First Post")), "my-first-post")


class GetArticleTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        store = get_blog_store()
        cls.author = create_user("denis", bio="bio", image="img.png")
        cls.with_author = store.create_article(Article(title="some art"), cls.author.id)
        cls.without_author = store.create_article(Article(title="some other art"))

    def setUp(self):
        self.api_client = APIClient()

    def test_returns_article_with_author_profile(self):
        response = self.api_client.get("/api/articles/some-art")
        body = assert_json(self, response)

        self.assertEqual(
            body,
            {
                "article": {
                    "slug": "some-art",
                    "title": "some art",
                    "author": {"username": "denis", "bio": "bio", "image": "img.png"},
                }
            },
        )

    def test_returns_article_without_author(self):
        body = assert_json(self, self.api_client.get("/api/articles/some-other-art"))

        self.assertEqual(body["article"]["title"], "some other art")
        self.assertIsNone(body["article"]["author"])

    def test_unknown_slug_404(self):
        response = self.api_client.get("/api/articles/unknown-slug")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.content, b"")

    def test_public_route_ignores_bad_authorization(self):
        """The auth gate only runs on protected routes."""
        self.api_client.credentials(HTTP_AUTHORIZATION="Garbage")
        response = self.api_client.get("/api/articles/some-art")

        self.assertEqual(response.status_code, 200)


class CreateArticleTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = create_user("denis", email="denis@gmail.com")

    def setUp(self):
        self.api_client = APIClient()
        self.api_client.credentials(HTTP_AUTHORIZATION=auth_header(self.user.login))

    def _post(self, payload):
        return self.api_client.post("/api/articles", payload, format="json")

    def _post_raw(self, body: str):
        return self.api_client.post("/api/articles", data=body, content_type="application/json")

    def test_creates_article_authored_by_token_user(self):
        response = self._post({"article": {"title": "My Post"}})
        body = assert_json(self, response)

        self.assertEqual(body["article"]["slug"], "my-post")
        self.assertEqual(body["article"]["title"], "My Post")
        self.assertEqual(body["article"]["author"]["username"], "denis")
        stored = get_blog_store().get_article("my-post")
        self.assertEqual(stored.author_id, self.user.id)

    def test_invalid_json_422(self):
        for raw in ("", "{", "[]", '{"article": "title"}'):
            with self.subTest(body=raw):
                errors = assert_422(self, self._post_raw(raw))
                self.assertEqual(errors, ["invalid json body"])

    def test_missing_title_422(self):
        for payload in ({}, {"article": {}}, {"article": {"title": ""}}, {"article": {"title": "   "}}):
            with self.subTest(payload=payload):
                errors = assert_422(self, self._post(payload))
                assert_required_fields(self, errors, ["title"])

    def test_duplicate_slug_422(self):
        assert_json(self, self._post({"article": {"title": "Same Title"}}))

        errors = assert_422(self, self._post({"article": {"title": "same   title"}}))

        self.assertIn("same-title", errors[0])

    def test_title_with_slash_is_readable(self):
        created = assert_json(self, self._post({"article": {"title": "Pros/Cons of Go"}}))["article"]

        self.assertEqual(created["slug"], "pros/cons-of-go")
        body = assert_json(self, self.api_client.get("/api/articles/pros/cons-of-go"))
        self.assertEqual(body["article"]["title"], "Pros/Cons of Go")

    def test_form_encoded_body_422(self):
        response = self.api_client.post(
            "/api/articles", data="title=x", content_type="application/x-www-form-urlencoded"
        )

        self.assertEqual(assert_422(self, response), ["invalid json body"])

    def test_deleted_author_creates_article_without_author(self):
        self.api_client.credentials(HTTP_AUTHORIZATION=auth_header("ghost"))

        body = assert_json(self, self._post({"article": {"title": "Orphan"}}))

        self.assertIsNone(body["article"]["author"])

    def test_store_failure_500(self):
        with mock.patch.object(DatabaseBlogStore, "create_article", side_effect=StoreError("disk full")):
            response = self._post({"article": {"title": "Lost"}})
        body = assert_json(self, response, 500)

        self.assertTrue(body["errors"]["body"])

    def test_requires_token(self):
        anonymous = APIClient()
        response = anonymous.post("/api/articles", {"article": {"title": "x"}}, format="json")
        body = assert_json(self, response, 401)

        self.assertTrue(body["errors"]["body"])
        self.assertFalse(ArticleModel.objects.filter(title="x").exists())

    def test_rejects_malformed_and_expired_tokens(self):
        expired = TokenService(settings.SECRET_KEY, ttl=timedelta(minutes=-5)).issue_token(AuthData("denis"))
        scheme = get_token_service().scheme
        for header in (f"Bearer {expired}", f"{scheme}", f"{scheme} not-a-jwt", f"{scheme} {expired}"):
            with self.subTest(header=header):
                client = APIClient()
                client.credentials(HTTP_AUTHORIZATION=header)
                response = client.post("/api/articles", {"article": {"title": "x"}}, format="json")
                self.assertEqual(response.status_code, 401)
