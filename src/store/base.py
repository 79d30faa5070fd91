"""Capability interface shared by every article/user store."""

from typing import Optional, Protocol

from .entities import Article, User, UserUpdate


class BlogStore(Protocol):
    """Persistence operations the HTTP handlers rely on.

    Lookups raise ``core.exceptions.NotFoundError`` for missing records; writes
    raise ``ConflictError`` on unique violations and ``StoreError`` otherwise.
    """

    def get_article(self, slug: str) -> Article: ...

    def create_article(self, article: Article, author_id: Optional[int] = None) -> Article: ...

    def get_user(self, login: str) -> User: ...

    def get_user_by_id(self, user_id: int) -> User: ...

    def update_user(self, login: str, data: UserUpdate) -> User: ...

    def registration(self, user: User) -> User: ...


__all__ = ["BlogStore"]
