"""
models.py — Record store for Roster


Purpose
===============================================================================
One row per managed user in the `users` table:
- id:          system-assigned, immutable primary key
- name, age, email (unique), dob
- profile_pic: "/uploads/<ms>.<ext>" relative to the public root, or NULL
- gender:      one of ROSTER_GENDER_OPTIONS
- skills:      JSON column holding a list of tags (checkbox values)
- bio:         free text


Design notes
- These are admin-screen records, not Django auth accounts; nothing here is
  linked to django.contrib.auth.
- skills is a loosely-typed JSON column. Writes always store a list, but the
  read side (users.loaders) still normalizes it because the column itself
  cannot promise array shape.
- profile_pic is a plain text column rather than a FileField: the file is
  staged and finalized by users.uploads, and the record only keeps the path.
- The column for profile_pic is named "profilePic" to match the wire key.
"""

from django.conf import settings
from django.db import models


GENDER_CHOICES = [(option, option) for option in settings.ROSTER_GENDER_OPTIONS]


class UserRecord(models.Model):
    name = models.TextField(help_text="Full name.")
    age = models.IntegerField(help_text="Age in years.")
    email = models.TextField(unique=True, help_text="Unique across all records.")
    dob = models.DateField(verbose_name="Date of Birth", help_text="Date of birth (YYYY-MM-DD).")
    profile_pic = models.TextField(
        db_column="profilePic", blank=True, null=True,
        verbose_name="Profile Picture",
        help_text="Public path of the uploaded picture, e.g. /uploads/1700000000000.png.",
    )
    gender = models.TextField(choices=GENDER_CHOICES, help_text="Single choice.")
    skills = models.JSONField(default=list, blank=True, help_text="List of strings, e.g. ['JS','Python']")
    bio = models.TextField(help_text="Free text.")

    class Meta:
        db_table = "users"
        ordering = ["id"]
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return f"{self.name} <{self.email}>"
