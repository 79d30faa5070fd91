"""Process-local blog store backed by dictionaries."""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Optional

from articles.utils import create_slug
from core.exceptions import ConflictError, NotFoundError

from .entities import Article, User, UserUpdate

logger = logging.getLogger(__name__)


class InMemoryBlogStore:
    """Keep articles and users in memory; every operation holds one lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._articles: dict[str, Article] = {}
        self._users: dict[str, User] = {}
        self._article_ids = itertools.count(1)
        self._user_ids = itertools.count(1)

    def get_article(self, slug: str) -> Article:
        with self._lock:
            article = self._articles.get(slug)
            if article is None:
                raise NotFoundError(f"article with slug {slug!r} was not found")
            return self._with_author(article)

    def create_article(self, article: Article, author_id: Optional[int] = None) -> Article:
        slug = create_slug(article.title)
        with self._lock:
            if slug in self._articles:
                raise ConflictError(f"article with slug {slug!r} already exists")
            stored = Article(id=next(self._article_ids), slug=slug, title=article.title, author_id=author_id)
            self._articles[slug] = stored
            logger.info("Created article %r", slug)
            return self._with_author(stored)

    def get_user(self, login: str) -> User:
        with self._lock:
            user = self._users.get(login)
            if user is None:
                raise NotFoundError(f"user with username {login!r} was not found")
            return user

    def get_user_by_id(self, user_id: int) -> User:
        with self._lock:
            return self._find_by_id(user_id)

    def update_user(self, login: str, data: UserUpdate) -> User:
        with self._lock:
            current = self._users.get(login)
            if current is None:
                raise NotFoundError(f"user with username {login!r} was not found")
            updated = data.apply_to(current)
            if updated.login != login:
                if updated.login in self._users:
                    raise ConflictError(f"username {updated.login!r} has already been taken")
                del self._users[login]
            self._users[updated.login] = updated
            return updated

    def registration(self, user: User) -> User:
        with self._lock:
            if user.login in self._users:
                raise ConflictError(f"username {user.login!r} has already been taken")
            stored = replace(user, id=next(self._user_ids))
            self._users[stored.login] = stored
            logger.info("Registered user %r", stored.login)
            return stored

    def _find_by_id(self, user_id: int) -> User:
        for user in self._users.values():
            if user.id == user_id:
                return user
        raise NotFoundError(f"user with id {user_id} was not found")

    def _with_author(self, article: Article) -> Article:
        if article.author_id is None:
            return article
        try:
            author = self._find_by_id(article.author_id)
        except NotFoundError:
            return article
        return replace(article, author=author.to_profile())


__all__ = ["InMemoryBlogStore"]
