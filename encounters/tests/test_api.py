"""
Integration tests for consultation notes.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed
from rest_framework.test import APITestCase

from accounts.enums import UserRole
from audit.models import ActivityLog
from core.tests.factories import make_patient, make_user
from encounters.containers import ConsultationContainer
from encounters.enums import ConsultationStatus
from encounters.models import Consultation


class ConsultationTests(APITestCase):
    def setUp(self):
        self.doctor = make_user(email="doc@clinic.test", role=UserRole.DOCTOR, first_name="Greg", last_name="House")
        self.patient = make_patient()
        self.client.force_authenticate(self.doctor)
        self.url = reverse("consultation-list")

    def record(self, **overrides):
        payload = {
            "patient": self.patient.pk,
            "presenting_complaint": "Persistent dry cough for three weeks with mild fever in the evenings",
            "assessment_diagnosis": "Suspected bronchitis",
            "plan": "Chest X-ray, review in one week",
        }
        payload.update(overrides)
        return self.client.post(self.url, payload, format="json")

    def test_create_defaults_doctor_and_truncates_reason(self):
        resp = self.record()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["doctor_name"], "Greg House")
        self.assertEqual(resp.data["patient_name"], "Jane Doe")
        self.assertEqual(resp.data["reason"], "Persistent dry cough for three weeks with mild fev")
        self.assertEqual(len(resp.data["reason"]), 50)
        self.assertEqual(resp.data["status"], ConsultationStatus.OPEN)
        self.assertTrue(ActivityLog.objects.filter(
            action=f"Recorded consultation for Jane Doe: {resp.data['reason']}",
        ).exists())

    def test_plan_required(self):
        resp = self.record(plan="")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("plan", resp.data["errors"])

    def test_update_status(self):
        note_id = self.record().data["id"]
        resp = self.client.patch(reverse("consultation-detail", args=[note_id]), {"status": ConsultationStatus.CLOSED}, format="json")
        self.assertEqual(resp.data["status"], ConsultationStatus.CLOSED)

    def test_notes_cannot_be_deleted(self):
        note_id = self.record().data["id"]
        resp = self.client.delete(reverse("consultation-detail", args=[note_id]))
        self.assertEqual(resp.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

        container = ConsultationContainer(actor=self.doctor)
        with self.assertRaises(MethodNotAllowed):
            container.remove(note_id)
        self.assertTrue(Consultation.objects.filter(pk=note_id).exists())

    def test_receptionist_can_read_but_not_write(self):
        self.record()
        self.client.force_authenticate(make_user(email="desk@clinic.test", role=UserRole.RECEPTIONIST))
        self.assertEqual(len(self.client.get(self.url, {"patient": self.patient.pk}).data), 1)
        self.assertEqual(self.record().status_code, status.HTTP_403_FORBIDDEN)
