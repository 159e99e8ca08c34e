"""
users/actions.py — Action dispatcher for the users screen

Purpose
===============================================================================
Every write to the users table goes through dispatch(). The submitted form
carries an `_intent` marker and exactly one operation runs:

- create → insert a record (optional profile picture, see users.uploads)
- update → overwrite every field of record `id` except id and profile_pic
- delete → remove record `id` (idempotent: an absent id is still a success)

Anything else is an invalid action and the store is not touched.

Results
===============================================================================
dispatch() never raises for expected failures; it returns an ActionResult
whose kind maps to one status code:

    SUCCESS         200 (201 for create)
    VALIDATION      400  missing/empty required field, non-numeric or out-of-range age,
                         bad id
    INVALID_ACTION  400  unknown `_intent`
    NOT_FOUND       404  update of an id that does not exist
    CONFLICT        409  duplicate email (IntegrityError)
    INFRASTRUCTURE  500  any other database or filesystem error

The cause of CONFLICT/INFRASTRUCTURE results is logged, not returned.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from django.conf import settings
from django.db import DatabaseError, IntegrityError, connection, transaction
from django.utils.dateparse import parse_date
from rest_framework import status

from .models import UserRecord
from .uploads import StagedUpload

logger = logging.getLogger(__name__)

INTENT_FIELD = "_intent"
INTENT_CREATE = "create"
INTENT_UPDATE = "update"
INTENT_DELETE = "delete"

MSG_CREATED = "User created successfully!"
MSG_UPDATED = "User updated successfully!"
MSG_DELETED = "User deleted successfully!"
MSG_REQUIRED = "All fields are required"
MSG_BAD_ID = "A valid user id is required"
MSG_INVALID_ACTION = "Invalid action"
MSG_NOT_FOUND = "User not found"
MSG_CONFLICT = "A user with this email already exists"
MSG_FAILURE = "Something went wrong!"

# Required on update. Create accepts an empty skills selection.
UPDATE_REQUIRED = ("name", "email", "dob", "gender", "skills", "bio")
CREATE_REQUIRED = ("name", "email", "dob", "gender", "bio")


class ResultKind(Enum):
    SUCCESS = "success"
    VALIDATION = "validation"
    INVALID_ACTION = "invalid_action"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INFRASTRUCTURE = "infrastructure"


STATUS_BY_KIND = {
    ResultKind.SUCCESS: status.HTTP_200_OK,
    ResultKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ResultKind.INVALID_ACTION: status.HTTP_400_BAD_REQUEST,
    ResultKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultKind.CONFLICT: status.HTTP_409_CONFLICT,
    ResultKind.INFRASTRUCTURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass
class ActionResult:
    kind: ResultKind
    message: str
    status_code: int
    record: Optional[UserRecord] = None
    fields: list = field(default_factory=list)

    @classmethod
    def success(cls, message, record=None, status_code=status.HTTP_200_OK):
        return cls(ResultKind.SUCCESS, message, status_code, record=record)

    @classmethod
    def failure(cls, kind, message, fields=None):
        return cls(kind, message, STATUS_BY_KIND[kind], fields=list(fields or []))

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    def as_payload(self) -> dict:
        if self.ok:
            return {"success": self.message}
        payload = {"error": self.message}
        if self.fields:
            payload["fields"] = self.fields
        return payload


# --------------------------------------------------------------------------- #
# Reading the submitted form                                                  #
# --------------------------------------------------------------------------- #

def get_list(data, key):
    """Multi-valued field: QueryDict.getlist, or a list/scalar from JSON."""
    if hasattr(data, "getlist"):
        values = data.getlist(key) or data.getlist(f"{key}[]")
    else:
        values = data.get(key)
        if values is None:
            values = data.get(f"{key}[]")
        if values is None:
            values = []
        elif not isinstance(values, (list, tuple)):
            values = [values]
    # order is not significant; drop blanks and duplicates
    return list(dict.fromkeys(str(v) for v in values if v not in (None, "")))


def _get_text(data, key):
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _parse_int(raw):
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


def _read_record_fields(data, required):
    """Return (values, invalid_field_names) for the editable scalar + choice fields."""
    values = {
        "name": _get_text(data, "name"),
        "email": _get_text(data, "email"),
        "gender": _get_text(data, "gender"),
        "skills": get_list(data, "skills"),
        "bio": str(data.get("bio") or ""),
    }
    invalid = [name for name in required if name != "dob" and not _filled(values[name])]

    age = _parse_int(data.get("age"))
    if age is None or not _in_integer_range(age):
        invalid.append("age")
    values["age"] = age

    dob_raw = _get_text(data, "dob")
    try:
        dob = parse_date(dob_raw) if dob_raw else None
    except ValueError:
        dob = None
    if dob is None and "dob" in required:
        invalid.append("dob")
    values["dob"] = dob

    if values["gender"] and values["gender"] not in settings.ROSTER_GENDER_OPTIONS:
        invalid.append("gender")
    if any(skill not in settings.ROSTER_SKILL_OPTIONS for skill in values["skills"]):
        invalid.append("skills")

    return values, list(dict.fromkeys(invalid))


def _in_integer_range(value):
    low, high = connection.ops.integer_field_range("IntegerField")
    return (low is None or value >= low) and (high is None or value <= high)


def _filled(value):
    if isinstance(value, list):
        return bool(value)
    return bool(str(value).strip())


# --------------------------------------------------------------------------- #
# Intents                                                                     #
# --------------------------------------------------------------------------- #

def _create(data, files):
    values, invalid = _read_record_fields(data, CREATE_REQUIRED)
    if invalid:
        logger.info("Create rejected, invalid fields: %s", ", ".join(invalid))
        return ActionResult.failure(ResultKind.VALIDATION, MSG_REQUIRED, invalid)

    with StagedUpload(files.get("profilePic")) as upload:
        with transaction.atomic():
            record = UserRecord.objects.create(profile_pic=upload.public_path, **values)
            upload.commit()

    logger.info("Created user %s", record.pk)
    return ActionResult.success(MSG_CREATED, record=record, status_code=status.HTTP_201_CREATED)


def _update(data, files):
    pk = _parse_int(data.get("id"))
    if pk is None:
        return ActionResult.failure(ResultKind.VALIDATION, MSG_BAD_ID, ["id"])

    values, invalid = _read_record_fields(data, UPDATE_REQUIRED)
    if invalid:
        logger.info("Update of user %s rejected, invalid fields: %s", pk, ", ".join(invalid))
        return ActionResult.failure(ResultKind.VALIDATION, MSG_REQUIRED, invalid)

    if files.get("profilePic") is not None:
        logger.debug("Ignoring profilePic on update of user %s", pk)

    with transaction.atomic():
        updated = UserRecord.objects.filter(pk=pk).update(**values)
    if not updated:
        return ActionResult.failure(ResultKind.NOT_FOUND, MSG_NOT_FOUND, ["id"])

    logger.info("Updated user %s", pk)
    return ActionResult.success(MSG_UPDATED, record=UserRecord.objects.get(pk=pk))


def _delete(data, files):
    pk = _parse_int(data.get("id"))
    if pk is None:
        return ActionResult.failure(ResultKind.VALIDATION, MSG_BAD_ID, ["id"])

    with transaction.atomic():
        deleted, _ = UserRecord.objects.filter(pk=pk).delete()
    logger.info("Deleted user %s (%d row(s))", pk, deleted)
    return ActionResult.success(MSG_DELETED)


HANDLERS = {
    INTENT_CREATE: _create,
    INTENT_UPDATE: _update,
    INTENT_DELETE: _delete,
}


def dispatch(data, files=None) -> ActionResult:
    """
    Run the operation named by data["_intent"] and report the outcome.

    `data` is a QueryDict (request.POST / DRF request.data) or a plain dict,
    `files` the matching MultiValueDict of uploads.
    """
    intent = data.get(INTENT_FIELD)
    handler = HANDLERS.get(intent) if isinstance(intent, str) else None
    if handler is None:
        logger.info("Rejected unknown intent %r", intent)
        return ActionResult.failure(ResultKind.INVALID_ACTION, MSG_INVALID_ACTION)

    logger.info("Dispatching %s", intent)
    try:
        return handler(data, files if files is not None else {})
    except IntegrityError:
        logger.warning("Integrity error during %s", intent, exc_info=True)
        return ActionResult.failure(ResultKind.CONFLICT, MSG_CONFLICT, ["email"])
    except (DatabaseError, OSError):
        logger.exception("Unexpected failure during %s", intent)
        return ActionResult.failure(ResultKind.INFRASTRUCTURE, MSG_FAILURE)
