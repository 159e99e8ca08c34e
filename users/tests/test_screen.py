"""
Integration tests for the server-rendered users screen (/users/).

The screen shares users.actions and users.loaders with the JSON API; these
tests focus on what the page shows: banner, form state and the table.
"""
import shutil
import tempfile
from pathlib import Path

from django.test import TestCase, override_settings

from users.models import UserRecord


class UsersScreenTests(TestCase):
    URL = "/users/"

    def setUp(self):
        public_root = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, public_root, ignore_errors=True)
        overrides = override_settings(ROSTER_PUBLIC_ROOT=public_root)
        overrides.enable()
        self.addCleanup(overrides.disable)

        self.ann = UserRecord.objects.create(
            name="Ann", age=30, email="ann@x.com", dob="1995-01-01",
            gender="Female", skills=["JS", "Python"], bio="hi",
        )

    def form_data(self, **over):
        data = {
            "_intent": "create",
            "name": "Bo",
            "age": "45",
            "email": "bo@x.com",
            "dob": "1980-05-05",
            "gender": "Male",
            "skills": ["Java"],
            "bio": "hello",
        }
        data.update(over)
        return data

    def test_root_redirects_to_users_screen(self):
        r = self.client.get("/")
        self.assertIn(r.status_code, (301, 302))
        self.assertEqual(r["Location"], self.URL)

    def test_empty_table_shows_placeholder(self):
        UserRecord.objects.all().delete()
        r = self.client.get(self.URL)
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "No data available")
        self.assertContains(r, "Add User")

    def test_table_lists_records(self):
        r = self.client.get(self.URL)
        self.assertContains(r, "ann@x.com")
        self.assertContains(r, "JS,Python")
        self.assertContains(r, "No Image")
        self.assertNotContains(r, "No data available")

    def test_non_list_skills_render_as_empty(self):
        UserRecord.objects.filter(pk=self.ann.pk).update(skills="JS")
        r = self.client.get(self.URL)
        self.assertEqual(r.status_code, 200)
        self.assertNotContains(r, "<td>JS</td>", html=False)

    def test_form_renders_every_field_kind(self):
        r = self.client.get(self.URL)
        for snippet in (
            'type="text" name="name"',
            'type="email" name="email"',
            'type="number" name="age"',
            'type="date" name="dob"',
            'type="file" name="profilePic"',
            'type="radio" name="gender" value="Others"',
            'type="checkbox" name="skills" value="Java"',
            '<textarea name="bio"',
        ):
            self.assertContains(r, snippet)

    def test_edit_prefills_form(self):
        r = self.client.get(self.URL, {"edit": self.ann.pk})
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, f'<input type="hidden" name="id" value="{self.ann.pk}">', html=True)
        self.assertContains(r, 'value="Ann"')
        self.assertContains(r, 'value="Python" checked')
        self.assertContains(r, 'value="Female" checked')
        self.assertContains(r, "Update User")
        self.assertContains(r, "Cancel")

    def test_edit_unknown_id_falls_back_to_create_form(self):
        r = self.client.get(self.URL, {"edit": self.ann.pk + 50})
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "Add User")
        self.assertNotContains(r, 'name="id" value="%d"' % (self.ann.pk + 50))

    def test_edit_with_non_ascii_digit_falls_back_to_create_form(self):
        r = self.client.get(self.URL, {"edit": "²"})
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "Add User")
        self.assertNotContains(r, "Update User")

    def test_post_create_shows_success_and_resets_form(self):
        r = self.client.post(self.URL, self.form_data())
        self.assertEqual(r.status_code, 201)
        self.assertContains(r, "User created successfully!", status_code=201)
        self.assertContains(r, "bo@x.com", status_code=201)
        self.assertContains(r, "Add User", status_code=201)
        self.assertTrue(UserRecord.objects.filter(email="bo@x.com").exists())

    def test_post_update_validation_failure_keeps_edit_state(self):
        r = self.client.post(
            self.URL,
            self.form_data(_intent="update", id=str(self.ann.pk), name="Ann", age="abc", email="ann@x.com"),
        )
        self.assertEqual(r.status_code, 400)
        self.assertContains(r, "All fields are required", status_code=400)
        self.assertContains(r, "Update User", status_code=400)
        self.ann.refresh_from_db()
        self.assertEqual(self.ann.age, 30)

    def test_failed_submit_keeps_bracketed_skills_checked(self):
        data = self.form_data(age="abc")
        data["skills[]"] = data.pop("skills")
        r = self.client.post(self.URL, data)
        self.assertEqual(r.status_code, 400)
        self.assertContains(r, 'value="Java" checked', status_code=400)
        self.assertNotContains(r, 'value="JS" checked', status_code=400)

    def test_post_delete_removes_row(self):
        r = self.client.post(self.URL, {"_intent": "delete", "id": str(self.ann.pk)})
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "User deleted successfully!")
        self.assertContains(r, "No data available")

    def test_post_unknown_intent(self):
        r = self.client.post(self.URL, self.form_data(_intent="foo"))
        self.assertEqual(r.status_code, 400)
        self.assertContains(r, "Invalid action", status_code=400)
        self.assertEqual(UserRecord.objects.count(), 1)
