"""Contract tests run against both blog store implementations."""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, TestCase

from core.exceptions import ConflictError, NotFoundError
from store import Article, User, UserUpdate, build_store
from store.database import DatabaseBlogStore
from store.memory import InMemoryBlogStore


class StoreContract:
    """Mixed into a TestCase; subclasses provide ``make_store``."""

    def make_store(self):
        raise NotImplementedError

    def setUp(self):
        super().setUp()
        self.store = self.make_store()
        self.author = self.store.registration(
            User(login="unit_test", email="unit@test.com", password="pw", bio="b", image="i")
        )

    def test_registration_assigns_id(self):
        self.assertIsNotNone(self.author.id)
        found = self.store.get_user("unit_test")
        self.assertEqual(found, self.author)
        self.assertEqual(self.store.get_user_by_id(self.author.id), self.author)

    def test_registration_rejects_duplicate_login(self):
        with self.assertRaises(ConflictError):
            self.store.registration(User(login="unit_test", email="other@test.com"))

    def test_missing_user(self):
        with self.assertRaises(NotFoundError):
            self.store.get_user("user1 user2 user3")
        with self.assertRaises(NotFoundError):
            self.store.get_user_by_id(987654)

    def test_create_article_with_author(self):
        created = self.store.create_article(Article(title="Test Insert Article"), self.author.id)

        self.assertEqual(created.slug, "test-insert-article")
        self.assertEqual(created.author.username, "unit_test")
        found = self.store.get_article(created.slug)
        self.assertEqual(found.title, "Test Insert Article")
        self.assertEqual(found.author, self.author.to_profile())

    def test_create_article_without_author(self):
        created = self.store.create_article(Article(title="anonymous"))

        self.assertIsNone(created.author)
        self.assertIsNone(self.store.get_article("anonymous").author_id)

    def test_create_article_ignores_client_slug(self):
        created = self.store.create_article(Article(title="Real Title", slug="fake"))

        self.assertEqual(created.slug, "real-title")

    def test_duplicate_slug_conflicts(self):
        self.store.create_article(Article(title="twice"))
        with self.assertRaises(ConflictError):
            self.store.create_article(Article(title="  TWICE "))

    def test_missing_article(self):
        with self.assertRaises(NotFoundError):
            self.store.get_article("1 2 3 4 5")

    def test_sparse_update_touches_only_present_fields(self):
        updated = self.store.update_user("unit_test", UserUpdate(bio="new"))

        self.assertEqual(updated.bio, "new")
        stored = self.store.get_user("unit_test")
        self.assertEqual(
            (stored.email, stored.password, stored.image, stored.bio),
            ("unit@test.com", "pw", "i", "new"),
        )

    def test_empty_update_keeps_user(self):
        self.assertEqual(self.store.update_user("unit_test", UserUpdate()), self.author)

    def test_rename(self):
        updated = self.store.update_user("unit_test", UserUpdate(username="unit_test_updated", email="e"))

        self.assertEqual((updated.login, updated.email, updated.id), ("unit_test_updated", "e", self.author.id))
        with self.assertRaises(NotFoundError):
            self.store.get_user("unit_test")

    def test_rename_to_taken_login_conflicts(self):
        self.store.registration(User(login="taken"))
        with self.assertRaises(ConflictError):
            self.store.update_user("unit_test", UserUpdate(username="taken"))
        self.assertEqual(self.store.get_user("unit_test"), self.author)

    def test_update_missing_user(self):
        with self.assertRaises(NotFoundError):
            self.store.update_user("ghost", UserUpdate(bio="x"))

    def test_article_embeds_current_profile(self):
        self.store.create_article(Article(title="profile follows"), self.author.id)
        self.store.update_user("unit_test", UserUpdate(bio="changed"))

        self.assertEqual(self.store.get_article("profile-follows").author.bio, "changed")


class DatabaseBlogStoreTests(StoreContract, TestCase):
    def make_store(self):
        return DatabaseBlogStore()


class InMemoryBlogStoreTests(StoreContract, SimpleTestCase):
    def make_store(self):
        return InMemoryBlogStore()


class UserUpdateTests(SimpleTestCase):
    def test_changes_only_present_fields(self):
        self.assertEqual(UserUpdate(username="a", bio="").changes(), {"login": "a", "bio": ""})

    def test_apply_to_keeps_absent_fields(self):
        user = User(login="u", email="e", password="p", bio="b", image="i", id=3)

        self.assertEqual(UserUpdate(image="new").apply_to(user), User("u", "e", "p", "b", "new", 3))


class BuildStoreTests(SimpleTestCase):
    def test_known_backends(self):
        self.assertIsInstance(build_store("memory"), InMemoryBlogStore)
        self.assertIsInstance(build_store("database"), DatabaseBlogStore)

    def test_unknown_backend(self):
        with self.assertRaises(ImproperlyConfigured):
            build_store("redis")
