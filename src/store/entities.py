"""Plain entities exchanged between the HTTP layer and the blog stores."""

from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class Profile:
    """Public projection of a user embedded in article responses."""

    username: str
    bio: str = ""
    image: str = ""


@dataclass(frozen=True)
class User:
    login: str
    email: str = ""
    password: str = ""
    bio: str = ""
    image: str = ""
    id: Optional[int] = None

    def to_profile(self) -> Profile:
        return Profile(username=self.login, bio=self.bio, image=self.image)


@dataclass(frozen=True)
class Article:
    title: str
    slug: str = ""
    author_id: Optional[int] = None
    author: Optional[Profile] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class UserUpdate:
    """Sparse profile update: ``None`` means the field was not sent."""

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        """Return the present fields keyed by User attribute name."""
        values = {
            "login": self.username,
            "email": self.email,
            "password": self.password,
            "bio": self.bio,
            "image": self.image,
        }
        return {field: value for field, value in values.items() if value is not None}

    def apply_to(self, user: User) -> User:
        return replace(user, **self.changes())


__all__ = ["Article", "Profile", "User", "UserUpdate"]
