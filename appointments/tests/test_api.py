"""
Integration tests for appointment booking: slot conflicts, automatic
invoicing and the provider-name cascade.
"""
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.enums import UserRole
from appointments.models import Appointment
from audit.models import ActivityLog
from billing.enums import PaymentStatus
from billing.models import Invoice
from core.tests.factories import make_patient, make_user


class AppointmentBookingTests(APITestCase):
    def setUp(self):
        self.user = make_user()
        self.doctor = make_user(email="doc@clinic.test", role=UserRole.DOCTOR, first_name="Greg", last_name="House")
        self.patient = make_patient()
        self.client.force_authenticate(self.user)
        self.url = reverse("appointments-list")

    def book(self, **overrides):
        payload = {
            "patient": self.patient.pk,
            "provider": self.doctor.pk,
            "date": "2024-06-03",
            "time": "10:30",
            "type": "CONSULTATION",
        }
        payload.update(overrides)
        return self.client.post(self.url, payload, format="json")

    def test_booking_creates_invoice_at_consultation_fee(self):
        resp = self.book()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["provider_name"], "Greg House")
        self.assertEqual(resp.data["payment_status"], PaymentStatus.PENDING_PAYMENT)

        invoice = Invoice.objects.get(pk=resp.data["invoice"])
        self.assertEqual(invoice.total_amount, Decimal("75.00"))
        self.assertEqual(invoice.source, "appointment")
        self.assertEqual(invoice.line_items[0]["source_id"], str(resp.data["id"]))
        self.assertTrue(ActivityLog.objects.filter(
            target_type="Appointment", target_id=str(resp.data["id"]),
            action="Booked Consultation for Jane Doe with Greg House",
        ).exists())

    def test_follow_up_is_not_billed(self):
        resp = self.book(type="FOLLOW_UP")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(resp.data["invoice"])
        self.assertEqual(resp.data["payment_status"], PaymentStatus.NOT_APPLICABLE)

    def test_double_booking_is_rejected(self):
        self.book()
        resp = self.book()
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["message"], "Greg House is already booked for 2024-06-03 at 10:30")
        self.assertEqual(Appointment.objects.count(), 1)
        self.assertEqual(Invoice.objects.count(), 1)

    def test_free_text_providers_collide_by_name(self):
        self.book(provider=None, provider_name="Dr. Visiting")
        resp = self.book(provider=None, provider_name="dr. visiting")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)

    def test_cancelled_slot_can_be_rebooked(self):
        first = self.book().data
        cancel = self.client.post(reverse("appointments-cancel", args=[first["id"]]))
        self.assertEqual(cancel.data["status"], "CANCELLED")
        self.assertEqual(self.book().status_code, status.HTTP_201_CREATED)

    def test_reactivating_into_taken_slot_is_rejected(self):
        first = self.book().data
        self.client.post(reverse("appointments-cancel", args=[first["id"]]))
        self.assertEqual(self.book().status_code, status.HTTP_201_CREATED)

        resp = self.client.patch(
            reverse("appointments-detail", args=[first["id"]]), {"status": "SCHEDULED"}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(Appointment.objects.get(pk=first["id"]).status, "CANCELLED")

    def test_reschedule_into_taken_slot_is_rejected(self):
        self.book()
        other = self.book(time="11:00").data
        resp = self.client.patch(reverse("appointments-detail", args=[other["id"]]), {"time": "10:30"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(str(Appointment.objects.get(pk=other["id"]).time), "11:00:00")

    def test_provider_or_name_required(self):
        resp = self.book(provider=None)
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("provider_name", resp.data["errors"])

    def test_filter_by_provider(self):
        self.book()
        self.book(provider=None, provider_name="Dr. Visiting")
        resp = self.client.get(self.url, {"provider": self.doctor.pk})
        self.assertEqual(len(resp.data), 1)

    def test_provider_rename_cascades(self):
        appt_id = self.book().data["id"]
        self.doctor.first_name = "Gregory"
        self.doctor.save()
        self.assertEqual(Appointment.objects.get(pk=appt_id).provider_name, "Gregory House")

    def test_delete(self):
        appt_id = self.book().data["id"]
        resp = self.client.delete(reverse("appointments-detail", args=[appt_id]))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Appointment.objects.exists())
