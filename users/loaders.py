"""
users/loaders.py — Read side of the users screen

load_users() is the single place where records leave the store for display
or the JSON API. It restores the "skills is always a list of strings"
invariant, since the JSON column itself can hold any value.
"""

from .models import UserRecord
from .serializers import UserRecordSerializer


def normalize_skills(value) -> list:
    """A list stays a list (items as str); anything else becomes []."""
    if isinstance(value, list):
        return [str(item) for item in value]
    return []


def load_users(queryset=None) -> list:
    if queryset is None:
        queryset = UserRecord.objects.all()
    rows = UserRecordSerializer(queryset, many=True).data
    return [{**row, "skills": normalize_skills(row.get("skills"))} for row in rows]
