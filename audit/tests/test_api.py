"""
Tests for the activity log: appending entries, actor snapshots and the
filtered newest-first listing.
"""
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.enums import UserRole
from audit.enums import Verb
from audit.models import ActivityLog
from audit.services import SYSTEM_ACTOR, log_activity, recent_activity
from core.tests.factories import make_user


class LogActivityTests(TestCase):
    def test_snapshots_actor(self):
        user = make_user(role=UserRole.NURSE, first_name="Nina", last_name="Nurse")
        entry = log_activity(actor=user, action="Checked vitals", target_type="Patient", target_id=7, icon="Heart")
        self.assertEqual(entry.actor_name, "Nina Nurse")
        self.assertEqual(entry.actor_role, "Nurse")
        self.assertEqual(entry.target_id, "7")
        self.assertEqual(entry.verb, Verb.ACTION)

    def test_without_actor_is_system(self):
        entry = log_activity(action="Nightly job")
        self.assertIsNone(entry.actor)
        self.assertEqual(entry.actor_name, SYSTEM_ACTOR)

    @override_settings(ACTIVITY_LOG_DEFAULT_LIMIT=2)
    def test_recent_activity_newest_first_with_default_limit(self):
        for n in range(3):
            log_activity(action=f"entry {n}")
        self.assertEqual([e.action for e in recent_activity()], ["entry 2", "entry 1"])


class ActivityLogAPITests(APITestCase):
    def setUp(self):
        self.admin = make_user()
        self.client.force_authenticate(self.admin)
        self.url = reverse("activity-log-list")

    def test_filters(self):
        doctor = make_user(email="doc@clinic.test", role=UserRole.DOCTOR)
        log_activity(actor=doctor, action="Booked", target_type="Appointment")
        log_activity(actor=self.admin, action="Billed", target_type="Invoice")
        log_activity(actor=self.admin, action="Ordered", target_type="Lab Order")

        self.assertEqual([e["action"] for e in self.client.get(self.url, {"role": "doctor"}).data], ["Booked"])
        self.assertEqual([e["action"] for e in self.client.get(self.url, {"entity_type": "invoice"}).data], ["Billed"])
        self.assertEqual(len(self.client.get(self.url, {"limit": 1}).data), 1)
        self.assertEqual(len(self.client.get(self.url, {"limit": "abc"}).data), 3)

    def test_append(self):
        resp = self.client.post(self.url, {
            "action": "Printed discharge summary",
            "actor_name": "Ada Admin",
            "target_type": "Admission",
            "target_id": "12",
            "icon": "Printer",
        }, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        entry = ActivityLog.objects.get()
        self.assertEqual(entry.actor, self.admin)
        self.assertEqual(entry.actor_role, "Administrator")

    def test_blank_action_rejected(self):
        resp = self.client.post(self.url, {"action": "  ", "actor_name": "Ada"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(ActivityLog.objects.exists())
