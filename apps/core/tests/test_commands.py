from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from apps.core.tests.fixtures import User, make_user


class EnsureAdminUserTest(TestCase):
    def test_creates_admin(self):
        out = StringIO()
        call_command("ensure_admin_user", email="Root@Example.com", password="changeme123", stdout=out)
        user = User.objects.get(email="root@example.com")
        self.assertEqual(user.role, "ADMIN")
        self.assertTrue(user.check_password("changeme123"))
        self.assertIn("Created", out.getvalue())

    def test_promotes_existing_user(self):
        make_user("sam@example.com")
        out = StringIO()
        call_command("ensure_admin_user", email="sam@example.com", password="another-pass", stdout=out)
        user = User.objects.get(email="sam@example.com")
        self.assertEqual(user.role, "ADMIN")
        self.assertTrue(user.check_password("another-pass"))
        self.assertIn("Updated", out.getvalue())

    def test_short_password(self):
        with self.assertRaises(CommandError):
            call_command("ensure_admin_user", email="root@example.com", password="short", stdout=StringIO())
