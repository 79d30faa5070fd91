"""Blog store backed by the Django ORM (``article`` and ``usr`` tables)."""

import logging
from typing import Optional

from django.db import DatabaseError, IntegrityError, transaction

from articles.models import Article as ArticleModel
from articles.utils import create_slug
from authentication.models import User as UserModel
from core.exceptions import ConflictError, NotFoundError, StoreError

from .entities import Article, User, UserUpdate

logger = logging.getLogger(__name__)


def _user_entity(row: UserModel) -> User:
    return User(
        id=row.id,
        login=row.login,
        email=row.email,
        password=row.password,
        bio=row.bio,
        image=row.image,
    )


def _article_entity(row: ArticleModel) -> Article:
    author = _user_entity(row.author).to_profile() if row.author is not None else None
    return Article(id=row.id, slug=row.slug, title=row.title, author_id=row.author_id, author=author)


class DatabaseBlogStore:
    """Map blog entities onto relational rows."""

    def get_article(self, slug: str) -> Article:
        try:
            row = ArticleModel.objects.select_related("author").get(slug=slug)
        except ArticleModel.DoesNotExist as exc:
            raise NotFoundError(f"article with slug {slug!r} was not found") from exc
        return _article_entity(row)

    def create_article(self, article: Article, author_id: Optional[int] = None) -> Article:
        slug = create_slug(article.title)
        try:
            with transaction.atomic():
                row = ArticleModel.objects.create(slug=slug, title=article.title, author_id=author_id)
        except IntegrityError as exc:
            raise ConflictError(f"article with slug {slug!r} already exists") from exc
        except DatabaseError as exc:
            raise StoreError(f"could not create article {slug!r}") from exc
        logger.info("Created article %r", slug)
        return _article_entity(row)

    def get_user(self, login: str) -> User:
        try:
            row = UserModel.objects.get(login=login)
        except UserModel.DoesNotExist as exc:
            raise NotFoundError(f"user with username {login!r} was not found") from exc
        return _user_entity(row)

    def get_user_by_id(self, user_id: int) -> User:
        try:
            row = UserModel.objects.get(id=user_id)
        except UserModel.DoesNotExist as exc:
            raise NotFoundError(f"user with id {user_id} was not found") from exc
        return _user_entity(row)

    def update_user(self, login: str, data: UserUpdate) -> User:
        changes = data.changes()
        if not changes:
            return self.get_user(login)
        try:
            with transaction.atomic():
                updated = UserModel.objects.filter(login=login).update(**changes)
        except IntegrityError as exc:
            raise ConflictError(f"username {changes.get('login')!r} has already been taken") from exc
        except DatabaseError as exc:
            raise StoreError(f"could not update user {login!r}") from exc
        if not updated:
            raise NotFoundError(f"user with username {login!r} was not found")
        return self.get_user(changes.get("login", login))

    def registration(self, user: User) -> User:
        try:
            with transaction.atomic():
                row = UserModel.objects.create(
                    login=user.login,
                    password=user.password,
                    email=user.email,
                    bio=user.bio,
                    image=user.image,
                )
        except IntegrityError as exc:
            raise ConflictError(f"username {user.login!r} has already been taken") from exc
        except DatabaseError as exc:
            raise StoreError(f"could not register user {user.login!r}") from exc
        logger.info("Registered user %r", row.login)
        return _user_entity(row)


__all__ = ["DatabaseBlogStore"]
