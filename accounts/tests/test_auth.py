"""
Tests for signing in with email and password and reading the current user
with the issued bearer token.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.enums import UserRole, UserStatus
from audit.models import ActivityLog
from core.tests.factories import make_user


class LoginTests(APITestCase):
    def setUp(self):
        self.user = make_user(email="doc@clinic.test", role=UserRole.DOCTOR, first_name="Greg", last_name="House")

    def login(self, email="doc@clinic.test", password="secret123"):
        return self.client.post(reverse("auth-login"), {"email": email, "password": password}, format="json")

    def test_login_returns_tokens_and_user(self):
        resp = self.login()
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertIn("access", resp.data["tokens"])
        self.assertIn("refresh", resp.data["tokens"])
        self.assertEqual(resp.data["user"]["name"], "Greg House")
        self.assertEqual(resp.data["user"]["role"], UserRole.DOCTOR)
        self.assertTrue(ActivityLog.objects.filter(action="Greg House signed in", actor=self.user).exists())

    def test_bad_password(self):
        resp = self.login(password="wrong")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["message"], "Invalid input.")

    def test_inactive_user_cannot_login(self):
        self.user.status = UserStatus.INACTIVE
        self.user.save()
        self.assertEqual(self.login().status_code, status.HTTP_400_BAD_REQUEST)

    def test_me_with_bearer_token(self):
        access = self.login().data["tokens"]["access"]
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        resp = self.client.get(reverse("auth-me"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["email"], "doc@clinic.test")

    def test_me_requires_token(self):
        resp = self.client.get(reverse("auth-me"))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_refresh(self):
        refresh = self.login().data["tokens"]["refresh"]
        resp = self.client.post(reverse("auth-token-refresh"), {"refresh": refresh}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertIn("access", resp.data)
