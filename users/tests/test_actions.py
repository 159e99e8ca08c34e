"""
Unit tests for users.actions.dispatch() called directly with QueryDicts,
the same objects the screen and the API hand over.
"""
from django.http import QueryDict
from django.test import TestCase

from users.actions import ResultKind, dispatch
from users.loaders import load_users, normalize_skills
from users.models import UserRecord


def _form(**fields):
    q = QueryDict(mutable=True)
    for key, value in fields.items():
        if isinstance(value, list):
            q.setlist(key, value)
        else:
            q[key] = value
    return q


class DispatchTests(TestCase):
    def setUp(self):
        self.ann = UserRecord.objects.create(
            name="Ann", age=30, email="ann@x.com", dob="1995-01-01",
            gender="Female", skills=["JS"], bio="hi",
        )

    def test_result_payloads(self):
        ok = dispatch(_form(_intent="delete", id=str(self.ann.pk)))
        self.assertIs(ok.kind, ResultKind.SUCCESS)
        self.assertEqual(ok.status_code, 200)
        self.assertEqual(ok.as_payload(), {"success": "User deleted successfully!"})

        bad = dispatch(_form(_intent="nope"))
        self.assertIs(bad.kind, ResultKind.INVALID_ACTION)
        self.assertEqual(bad.as_payload(), {"error": "Invalid action"})

    def test_create_returns_record(self):
        result = dispatch(_form(
            _intent="create", name="Bo", age="45", email="bo@x.com", dob="1980-05-05",
            gender="Male", bio="b",
        ))
        self.assertIs(result.kind, ResultKind.SUCCESS)
        self.assertEqual(result.status_code, 201)
        self.assertEqual(result.record.skills, [])
        self.assertIsNone(result.record.profile_pic)

    def test_create_rejects_unknown_options(self):
        result = dispatch(_form(
            _intent="create", name="Bo", age="45", email="bo@x.com", dob="1980-05-05",
            gender="Robot", skills=["Cobol"], bio="b",
        ))
        self.assertIs(result.kind, ResultKind.VALIDATION)
        self.assertEqual(result.fields, ["gender", "skills"])

    def test_invalid_calendar_date_is_validation(self):
        result = dispatch(_form(
            _intent="update", id=str(self.ann.pk), name="Ann", age="30", email="ann@x.com",
            dob="1995-02-30", gender="Female", skills=["JS"], bio="hi",
        ))
        self.assertIs(result.kind, ResultKind.VALIDATION)
        self.assertEqual(result.fields, ["dob"])

    def test_update_with_whitespace_name_is_rejected(self):
        result = dispatch(_form(
            _intent="update", id=str(self.ann.pk), name="   ", age="30", email="ann@x.com",
            dob="1995-01-01", gender="Female", skills=["JS"], bio="hi",
        ))
        self.assertIs(result.kind, ResultKind.VALIDATION)
        self.ann.refresh_from_db()
        self.assertEqual(self.ann.name, "Ann")

    def test_non_string_intent_from_json_is_invalid_action(self):
        for intent in (["create"], {"op": "create"}, 1):
            with self.subTest(intent=intent):
                result = dispatch({"_intent": intent})
                self.assertIs(result.kind, ResultKind.INVALID_ACTION)
                self.assertEqual(result.status_code, 400)

    def test_delete_absent_id_is_success(self):
        result = dispatch(_form(_intent="delete", id=str(self.ann.pk + 999)))
        self.assertIs(result.kind, ResultKind.SUCCESS)
        self.assertEqual(UserRecord.objects.count(), 1)


class LoaderTests(TestCase):
    def test_normalize_skills(self):
        self.assertEqual(normalize_skills(["JS", 3]), ["JS", "3"])
        self.assertEqual(normalize_skills("JS"), [])
        self.assertEqual(normalize_skills(None), [])
        self.assertEqual(normalize_skills({"JS": True}), [])

    def test_load_users_shape(self):
        UserRecord.objects.create(
            name="Ann", age=30, email="ann@x.com", dob="1995-01-01",
            gender="Female", skills="JS", bio="hi",
        )
        rows = load_users()
        self.assertEqual(len(rows), 1)
        self.assertEqual(
            set(rows[0]),
            {"id", "name", "email", "age", "dob", "profilePic", "gender", "skills", "bio"},
        )
        self.assertEqual(rows[0]["skills"], [])
