"""
users/admin.py — Django Admin configuration for Roster

Purpose
===============================================================================
A back-office view of the users table for QA and debugging, next to the main
users screen. Columns mirror the screen's table; skills and the picture path
get small display helpers.

How to read this file (plain English):
- list_display: columns shown in the admin list page (the big table).
- list_filter: right-hand sidebar filters to narrow results without typing.
- search_fields: text search across chosen fields (substring match).
- ordering: default sort order in the list page.

Notes
- profile_pic is read-only here: pictures are only set by the create action
  of the users screen (see users.actions), which also writes the file.
"""

from django.contrib import admin

from .loaders import normalize_skills
from .models import UserRecord


@admin.register(UserRecord)
class UserRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "age", "dob", "gender", "skills_display", "has_picture")
    list_filter = ("gender", "dob")
    search_fields = ("name", "email", "bio")
    ordering = ("id",)
    readonly_fields = ("profile_pic",)
    fields = ("name", "email", "age", "dob", "profile_pic", "gender", "skills", "bio")

    @admin.display(description="Skills")
    def skills_display(self, obj):
        return ", ".join(normalize_skills(obj.skills)) or "No Skills"

    @admin.display(description="Picture", boolean=True)
    def has_picture(self, obj):
        return bool(obj.profile_pic)
