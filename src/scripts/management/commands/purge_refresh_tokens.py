"""Delete refresh tokens that have expired."""

from django.core.management.base import BaseCommand

from authentication.services import purge_expired_refresh_tokens


class Command(BaseCommand):
    help = "Remove expired refresh tokens from the database."

    def handle(self, *args, **options):
        deleted = purge_expired_refresh_tokens()
        self.stdout.write(self.style.SUCCESS(f"Removed {deleted} expired refresh token(s)."))
