"""
Integration tests for user administration and the application settings.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.containers import UserContainer
from accounts.enums import UserRole, UserStatus
from accounts.models import User
from audit.models import ActivityLog
from core.tests.factories import make_user
from system_admin.services import DEFAULT_THEME_COLORS, SettingsStore


class UserAdminTests(APITestCase):
    def setUp(self):
        self.admin = make_user()
        self.client.force_authenticate(self.admin)
        self.url = reverse("system-admin-users-list")

    def new_user(self, **overrides):
        payload = {
            "name": "Lara Lab",
            "email": "Lara@Clinic.test",
            "password": "secret123",
            "role": UserRole.LAB_TECHNICIAN,
            "status": UserStatus.ACTIVE,
        }
        payload.update(overrides)
        return self.client.post(self.url, payload, format="json")

    def test_create_user(self):
        resp = self.new_user()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["email"], "lara@clinic.test")
        self.assertEqual(resp.data["first_name"], "Lara")
        self.assertNotIn("password", resp.data)
        self.assertTrue(User.objects.get(email="lara@clinic.test").check_password("secret123"))
        self.assertTrue(ActivityLog.objects.filter(action="Created user Lara Lab (Lab Technician)").exists())

    def test_duplicate_email_conflicts(self):
        self.new_user()
        resp = self.new_user(email="LARA@clinic.test")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["message"], "A user with this email already exists.")
        self.assertEqual(User.objects.filter(email__iexact="lara@clinic.test").count(), 1)

    def test_update_status_blocks_login(self):
        user_id = self.new_user().data["id"]
        resp = self.client.patch(reverse("system-admin-users-detail", args=[user_id]), {"status": UserStatus.INACTIVE}, format="json")
        self.assertEqual(resp.data["status"], UserStatus.INACTIVE)
        self.assertFalse(User.objects.get(pk=user_id).is_active)

    def test_empty_update_rejected(self):
        user_id = self.new_user().data["id"]
        resp = self.client.patch(reverse("system-admin-users-detail", args=[user_id]), {}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete(self):
        user_id = self.new_user().data["id"]
        resp = self.client.delete(reverse("system-admin-users-detail", args=[user_id]))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertTrue(ActivityLog.objects.filter(action=f"Deleted user with ID: {user_id}").exists())

    def test_filter_by_role(self):
        self.new_user()
        resp = self.client.get(self.url, {"role": UserRole.LAB_TECHNICIAN})
        self.assertEqual([u["email"] for u in resp.data], ["lara@clinic.test"])

    def test_non_admin_forbidden(self):
        self.client.force_authenticate(make_user(email="doc@clinic.test", role=UserRole.DOCTOR))
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_403_FORBIDDEN)

    def test_directory_subscribers_see_new_users(self):
        directory = UserContainer().open()
        self.addCleanup(directory.close)
        seen = []
        directory.subscribe(lambda c: seen.append(len(c.items)))

        self.new_user()
        self.assertIn("lara@clinic.test", [u.email for u in directory.items])
        self.assertEqual(seen[-1], 2)


class SettingsTests(APITestCase):
    def setUp(self):
        self.admin = make_user()
        self.client.force_authenticate(self.admin)
        self.url = reverse("system-admin-settings")

    def test_defaults(self):
        resp = self.client.get(self.url)
        self.assertEqual(resp.data["currency"], "USD")
        self.assertEqual(resp.data["theme_colors"], DEFAULT_THEME_COLORS)

    def test_patch_merges_theme_colors(self):
        resp = self.client.patch(self.url, {"currency": "UGX", "theme_colors": {"primary": "0 50% 50%"}}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["currency"], "UGX")
        self.assertEqual(resp.data["theme_colors"]["primary"], "0 50% 50%")
        self.assertEqual(resp.data["theme_colors"]["accent"], DEFAULT_THEME_COLORS["accent"])
        self.assertEqual(SettingsStore()["currency"], "UGX")

    def test_invalid_hours_rejected(self):
        resp = self.client.patch(self.url, {"clinic_open_time": "18:00", "clinic_close_time": "09:00"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("clinic_close_time", resp.data["errors"])

    def test_reset_theme(self):
        self.client.patch(self.url, {"theme_colors": {"primary": "0 50% 50%"}}, format="json")
        resp = self.client.post(reverse("system-admin-reset-theme"))
        self.assertEqual(resp.data["theme_colors"], DEFAULT_THEME_COLORS)

    def test_store_notifies_listeners(self):
        store = SettingsStore()
        changes = []
        store.subscribe(lambda key, value: changes.append(key))
        store.set_theme_color("accent", "10 10% 10%")
        self.assertEqual(changes, ["theme_colors"])
        self.assertEqual(SettingsStore()["theme_colors"]["accent"], "10 10% 10%")

    def test_non_admin_can_read_but_not_change(self):
        self.client.force_authenticate(make_user(email="desk@clinic.test", role=UserRole.RECEPTIONIST))
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.patch(self.url, {"currency": "UGX"}, format="json").status_code, status.HTTP_403_FORBIDDEN)
