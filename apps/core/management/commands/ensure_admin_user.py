# PATH: apps/core/management/commands/ensure_admin_user.py
"""
Create (or reset the password of) an ADMIN account for local use.

  python manage.py ensure_admin_user --email=admin@exampass.local --password=changeme123
"""
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from exampass.adapters.db.django import repositories_core as core_repo


class Command(BaseCommand):
    help = "Ensure an ADMIN user exists with the given email and password."

    def add_arguments(self, parser):
        parser.add_argument(
            "--email",
            type=str,
            default="admin@exampass.local",
            help="Login email (default: admin@exampass.local)",
        )
        parser.add_argument(
            "--password",
            type=str,
            required=True,
            help="Password for the admin user (min 8 chars)",
        )
        parser.add_argument(
            "--name",
            type=str,
            default="Administrator",
            help="Display name when creating the user",
        )

    def handle(self, *args, **options):
        email = (options["email"] or "").strip().lower()
        password = options["password"] or ""
        name = (options["name"] or "Administrator").strip()

        if not email:
            raise CommandError("--email is required")
        if len(password) < 8:
            raise CommandError("--password must be at least 8 characters")

        with transaction.atomic():
            user, created = core_repo.user_get_or_create_admin(email, name)
            user.set_password(password)
            user.role = user.Role.ADMIN
            user.is_active = True
            user.is_staff = True
            user.save(update_fields=["password", "role", "is_active", "is_staff"])

        if created:
            self.stdout.write(self.style.SUCCESS(f"Created ADMIN user: {email}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Updated ADMIN user: {email} (password reset)"))
