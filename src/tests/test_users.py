"""User administration endpoints."""

from __future__ import annotations

from unittest import mock

from django.contrib.auth import get_user_model
from django.db import DatabaseError

from authentication.managers import UserManager
from tests.utils import APITestCase, authenticated_client, create_user

User = get_user_model()

URL = "/api/v1/users/"


class UserAdminTests(APITestCase):
    def test_list_users(self):
        response = self.admin_client.get(URL)
        body = response.json()

        self.assertEqual(response.status_code, 200)
        usernames = {item["username"] for item in body["data"]["items"]}
        self.assertTrue({"admin", "editor", "reader"} <= usernames)
        self.assertNotIn("passwordHash", body["data"]["items"][0])

    def test_editor_reads_but_cannot_create_users(self):
        self.assertEqual(self.editor_client.get(URL).status_code, 200)
        self.assertEqual(self.editor_client.post(URL, {}, format="json").status_code, 403)

    def test_create_user_with_roles(self):
        payload = {
            "username": "newbie",
            "email": "newbie@example.com",
            "password": "Secret123!",
            "fullName": "New Bie",
            "roleIds": [self.roles["EDITOR"].pk],
        }
        response = self.admin_client.post(URL, payload, format="json")
        data = response.json()["data"]

        self.assertEqual(response.status_code, 201)
        self.assertEqual(data["roles"], ["EDITOR"])
        user = User.objects.get(username="newbie")
        self.assertNotEqual(user.password_hash, "Secret123!")
        self.assertTrue(UserManager.verify_password(user, "Secret123!"))

    def test_create_duplicate_user_conflicts(self):
        payload = {"username": "reader", "email": "other@example.com", "password": "Secret123!"}
        response = self.admin_client.post(URL, payload, format="json")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["code"], "CONFLICT")

    def test_create_with_unknown_role(self):
        payload = {"username": "x1", "email": "x1@example.com", "password": "Secret123!", "roleIds": [999999]}
        response = self.admin_client.post(URL, payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("999999", response.json()["error"]["details"][0]["message"])
        self.assertFalse(User.objects.filter(username="x1").exists())

    def test_create_is_rolled_back_when_role_assignment_fails(self):
        payload = {
            "username": "halfway",
            "email": "halfway@example.com",
            "password": "Secret123!",
            "roleIds": [self.roles["EDITOR"].pk],
        }
        with mock.patch("authentication.serializers.replace_roles", side_effect=DatabaseError("write failed")):
            response = self.admin_client.post(URL, payload, format="json")

        self.assertEqual(response.status_code, 503)
        self.assertFalse(User.objects.filter(username="halfway").exists())

    def test_update_status(self):
        user = create_user("target")
        response = self.admin_client.patch(f"{URL}{user.pk}/status/", {"isActive": False}, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["data"]["isActive"])
        user.refresh_from_db()
        self.assertFalse(user.is_active)

    def test_replace_roles(self):
        user = create_user("target", [self.roles["USER"]])
        payload = {"roleIds": [self.roles["EDITOR"].pk, self.roles["ADMIN"].pk]}

        response = self.admin_client.put(f"{URL}{user.pk}/roles/", payload, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(sorted(response.json()["data"]["roles"]), ["ADMIN", "EDITOR"])

    def test_replace_roles_with_unknown_id_changes_nothing(self):
        user = create_user("target", [self.roles["USER"]])
        payload = {"roleIds": [self.roles["EDITOR"].pk, 999999]}

        response = self.admin_client.put(f"{URL}{user.pk}/roles/", payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(list(user.roles.values_list("name", flat=True)), ["USER"])

    def test_role_change_applies_to_next_request(self):
        user = create_user("promoted", [self.roles["USER"]])

        client = authenticated_client(user)
        self.assertEqual(client.get(URL).status_code, 200)  # USER has READ_USER
        self.assertEqual(client.post(URL, {}, format="json").status_code, 403)

        self.admin_client.put(f"{URL}{user.pk}/roles/", {"roleIds": [self.roles["ADMIN"].pk]}, format="json")
        self.assertEqual(client.post(URL, {}, format="json").status_code, 400)

    def test_list_roles(self):
        response = self.reader_client.get("/api/v1/roles/")
        items = response.json()["data"]["items"]

        self.assertEqual(response.status_code, 200)
        names = {item["name"] for item in items}
        self.assertEqual(names, {"SUPER_ADMIN", "ADMIN", "EDITOR", "USER"})
        user_role = next(item for item in items if item["name"] == "USER")
        self.assertTrue(all(name.startswith("READ_") for name in user_role["permissions"]))
