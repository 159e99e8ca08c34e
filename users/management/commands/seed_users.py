"""
Management command: seed_users
------------------------------

Purpose:
    Populates a fresh database with a few user records so the users screen
    has something to show during demos or local development.

Behavior:
    - Idempotent: uses get_or_create keyed on email, so running it multiple
      times will not create duplicate rows.
    - Records are created without a profile picture.

Usage:
    python manage.py seed_users
"""

from datetime import date

from django.core.management.base import BaseCommand

from users.models import UserRecord


DEMO_USERS = [
    {
        "name": "Ann Lee",
        "email": "ann@example.com",
        "age": 30,
        "dob": date(1995, 1, 1),
        "gender": "Female",
        "skills": ["JS", "Python"],
        "bio": "Frontend developer who also writes data scripts.",
    },
    {
        "name": "Ben Ortiz",
        "email": "ben@example.com",
        "age": 41,
        "dob": date(1984, 6, 12),
        "gender": "Male",
        "skills": ["Java"],
        "bio": "Backend services and build tooling.",
    },
    {
        "name": "Sam Kerr",
        "email": "sam@example.com",
        "age": 26,
        "dob": date(1999, 9, 23),
        "gender": "Others",
        "skills": [],
        "bio": "Just joined.",
    },
]


class Command(BaseCommand):
    help = "Create a few demo user records (idempotent)."

    def handle(self, *args, **options):
        created_count = 0
        for payload in DEMO_USERS:
            data = dict(payload)
            email = data.pop("email")
            _, created = UserRecord.objects.get_or_create(email=email, defaults=data)
            if created:
                created_count += 1
                self.stdout.write(f"Created {email}")
            else:
                self.stdout.write(f"{email} already exists.")

        self.stdout.write(self.style.SUCCESS(f"Seeded {created_count} new user record(s)."))
