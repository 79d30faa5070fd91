"""Django settings for the blog API.

Environment-driven configuration for the database, the article/user store,
token authentication, and logging.
"""
import os
from pathlib import Path
from urllib.parse import urlparse

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def _get_env(name: str, default: str | None = None) -> str | None:
    """Read an environment variable with an optional fallback."""
    return os.environ.get(name, default)


def _parse_database_url(url: str) -> dict:
    """Parse a PostgreSQL or SQLite DATABASE_URL into a Django DATABASES entry."""
    parsed = urlparse(url)
    if parsed.scheme == "sqlite":
        # sqlite:///relative.db or sqlite:////absolute/path.db
        name = parsed.path[1:] or "db.sqlite3"
        if name != ":memory:" and not os.path.isabs(name):
            name = BASE_DIR / name
        return {"ENGINE": "django.db.backends.sqlite3", "NAME": name}
    if parsed.scheme in ("postgres", "postgresql"):
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": parsed.path.lstrip("/"),
            "USER": parsed.username,
            "PASSWORD": parsed.password,
            "HOST": parsed.hostname,
            "PORT": parsed.port or "5432",
        }
    raise ImproperlyConfigured(f"Unsupported DATABASE_URL scheme: {parsed.scheme!r}")


SECRET_KEY = _get_env("SECRET_KEY", "dev-secret-key-change-me-0123456789abcdef")
DEBUG = _get_env("DEBUG", "True") == "True"
if not DEBUG and SECRET_KEY.startswith("dev-secret-key-change-me"):
    raise ImproperlyConfigured("SECRET_KEY must be set in production")
ALLOWED_HOSTS = [
    h.strip()
    for h in _get_env("ALLOWED_HOSTS", "localhost,127.0.0.1,0.0.0.0").split(",")
    if h.strip()
]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "drf_spectacular",
    "core",
    "authentication",
    "articles",
    "scripts",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    # Rejects unauthenticated requests to protected routes before the view runs.
    "core.middleware.TokenAuthMiddleware",
]

ROOT_URLCONF = "core.urls"
APPEND_SLASH = False

WSGI_APPLICATION = "core.wsgi.application"
ASGI_APPLICATION = "core.asgi.application"

DATABASES = {"default": _parse_database_url(_get_env("DATABASE_URL", "sqlite:///db.sqlite3"))}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

BLOG_STORE = _get_env("BLOG_STORE", "database")
if BLOG_STORE not in ("database", "memory"):
    raise ImproperlyConfigured("BLOG_STORE must be either 'database' or 'memory'")

AUTH_HEADER_SCHEME = _get_env("AUTH_HEADER_SCHEME", "Token")
try:
    AUTH_TOKEN_TTL_MINUTES = int(_get_env("AUTH_TOKEN_TTL_MINUTES", "30"))
except ValueError as exc:
    raise ImproperlyConfigured("AUTH_TOKEN_TTL_MINUTES must be an integer") from exc

LOG_LEVEL = _get_env("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S",
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "console"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        name: {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False}
        for name in ("core", "authentication", "articles", "store", "scripts")
    },
}

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": ["core.authentication.MiddlewareUserAuthentication"],
    "DEFAULT_PERMISSION_CLASSES": [],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "core.exceptions.blog_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Blog API",
    "DESCRIPTION": (
        "Articles, registration, login and profile management with "
        "JWT bearer tokens sent as `Authorization: Token <jwt>`."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "SERVE_PUBLIC": True,
}
