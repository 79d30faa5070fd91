"""Seed a demo user and demo articles through the configured blog store."""

from django.core.management.base import BaseCommand

from core.exceptions import ConflictError, NotFoundError
from store import Article, User, get_blog_store

DEMO_USER = User(
    login="demo",
    email="demo@example.com",
    password="demo",
    bio="Writes the sample articles.",
)
DEMO_TITLES = ["Welcome to the blog", "Writing your first article"]


class Command(BaseCommand):
    """Management command creating sample data; safe to run repeatedly."""

    help = (
        "Create a demo user and sample articles via the BLOG_STORE backend. "
        "Existing records are left untouched."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--username",
            default=DEMO_USER.login,
            help="Login of the demo author (default: %(default)s).",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        store = get_blog_store()
        self.stdout.write("Seeding blog data...")
        author = self._ensure_user(store, options["username"])
        for title in DEMO_TITLES:
            try:
                article = store.create_article(Article(title=title), author.id)
            except ConflictError:
                self.stdout.write(f"Article {title!r} already exists, skipping.")
                continue
            self.stdout.write(f"Created article {article.slug!r}.")
        self.stdout.write(self.style.SUCCESS("Blog seed completed."))

    def _ensure_user(self, store, login: str) -> User:
        """Return the demo author, registering it on first run."""
        try:
            return store.get_user(login)
        except NotFoundError:
            user = store.registration(
                User(login=login, email=DEMO_USER.email, password=DEMO_USER.password, bio=DEMO_USER.bio)
            )
            self.stdout.write(f"Registered user {login!r} (password {DEMO_USER.password!r}).")
            return user
