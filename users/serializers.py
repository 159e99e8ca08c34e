"""
serializers.py — DRF serializers for Roster

Defines the public JSON shape of a user record (the read contract):

    {id, name, age, email, dob, profilePic, gender, skills, bio}

Writes do not go through this serializer; they are form-encoded and handled
by users.actions.dispatch(). The serializer is read-only on purpose so the
schema in /api/docs reflects what GET /api/users/ returns.
"""

from rest_framework import serializers

from .models import UserRecord


class UserRecordSerializer(serializers.ModelSerializer):
    # Wire key stays camelCase, matching the upload form field.
    profilePic = serializers.CharField(source="profile_pic", allow_null=True, read_only=True)
    skills = serializers.JSONField(read_only=True)

    class Meta:
        model = UserRecord
        # Order mirrors the form (users/form_config.py), id first.
        fields = [
            "id",
            "name",
            "email",
            "age",
            "dob",
            "profilePic",
            "gender",
            "skills",
            "bio",
        ]
        read_only_fields = fields

