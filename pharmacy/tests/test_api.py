"""
Integration tests for the pharmacy: inventory stock status, stock
adjustments and the prescription dispensing workflow.
"""
from io import StringIO

from django.core.management import call_command
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.enums import UserRole
from audit.models import ActivityLog
from billing.enums import PaymentStatus
from billing.models import Invoice
from core.tests.factories import make_patient, make_user
from pharmacy.enums import RxStatus, StockStatus
from pharmacy.models import Medication, Prescription


@override_settings(LOW_STOCK_THRESHOLD=10)
class MedicationTests(APITestCase):
    def setUp(self):
        self.pharmacist = make_user(email="rx@clinic.test", role=UserRole.PHARMACIST)
        self.client.force_authenticate(self.pharmacist)

    def test_status_follows_stock(self):
        resp = self.client.post(reverse("medication-list"), {"name": "Amoxicillin", "dosage": "500mg", "stock": 5}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["status"], StockStatus.LOW_STOCK)

        med_id = resp.data["id"]
        resp = self.client.patch(reverse("medication-detail", args=[med_id]), {"stock": 40}, format="json")
        self.assertEqual(resp.data["status"], StockStatus.IN_STOCK)

        resp = self.client.post(reverse("medication-adjust", args=[med_id]), {"delta": -50}, format="json")
        self.assertEqual(resp.data["stock"], 0)
        self.assertEqual(resp.data["status"], StockStatus.OUT_OF_STOCK)

    def test_negative_stock_rejected(self):
        resp = self.client.post(reverse("medication-list"), {"name": "Paracetamol", "stock": -1}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_zero_adjustment_rejected(self):
        med = Medication.objects.create(name="Paracetamol", stock=20)
        resp = self.client.post(reverse("medication-adjust", args=[med.pk]), {"delta": 0}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_low_stock_listing(self):
        Medication.objects.create(name="Plenty", stock=100)
        Medication.objects.create(name="Few", stock=3)
        Medication.objects.create(name="None", stock=0)
        resp = self.client.get(reverse("medication-low-stock"))
        self.assertEqual([m["name"] for m in resp.data], ["None", "Few"])

    def test_receptionist_cannot_edit_inventory(self):
        self.client.force_authenticate(make_user(email="desk@clinic.test", role=UserRole.RECEPTIONIST))
        resp = self.client.post(reverse("medication-list"), {"name": "X", "stock": 1}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.get(reverse("medication-list")).status_code, status.HTTP_200_OK)


class PrescriptionTests(APITestCase):
    def setUp(self):
        self.pharmacist = make_user(email="rx@clinic.test", role=UserRole.PHARMACIST)
        self.patient = make_patient()
        self.med = Medication.objects.create(name="Amoxicillin", dosage="500mg", stock=20, price_per_unit="2.50")
        self.client.force_authenticate(self.pharmacist)

    def prescribe(self, **overrides):
        payload = {
            "patient": self.patient.pk,
            "medication_name": "amoxicillin",
            "dosage": "500mg",
            "quantity": 14,
            "prescribed_by": "Dr. Who",
        }
        payload.update(overrides)
        return self.client.post(reverse("prescription-list"), payload, format="json")

    def test_create_fills_patient_name(self):
        resp = self.prescribe()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["patient_name"], "Jane Doe")
        self.assertEqual(resp.data["status"], RxStatus.PENDING)
        self.assertEqual(resp.data["payment_status"], PaymentStatus.NOT_APPLICABLE)

    def test_zero_quantity_rejected(self):
        self.assertEqual(self.prescribe(quantity=0).status_code, status.HTTP_400_BAD_REQUEST)

    def test_dispense_draws_stock(self):
        rx_id = self.prescribe().data["id"]
        resp = self.client.post(reverse("prescription-dispense", args=[rx_id]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["status"], RxStatus.DISPENSED)
        self.med.refresh_from_db()
        self.assertEqual(self.med.stock, 6)
        self.assertEqual(self.med.status, StockStatus.LOW_STOCK)

    def test_dispense_twice_conflicts(self):
        rx_id = self.prescribe().data["id"]
        self.client.post(reverse("prescription-dispense", args=[rx_id]))
        resp = self.client.post(reverse("prescription-dispense", args=[rx_id]))
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["message"], "Prescription is already dispensed.")

    def test_insufficient_stock_conflicts_without_change(self):
        rx_id = self.prescribe(quantity=30).data["id"]
        resp = self.client.post(reverse("prescription-dispense", args=[rx_id]))
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(Prescription.objects.get(pk=rx_id).status, RxStatus.PENDING)
        self.med.refresh_from_db()
        self.assertEqual(self.med.stock, 20)

    def test_refill(self):
        rx_id = self.prescribe(refillable=True, refills_remaining=1).data["id"]
        self.client.post(reverse("prescription-dispense", args=[rx_id]))
        resp = self.client.post(reverse("prescription-refill", args=[rx_id]))
        self.assertEqual(resp.data["status"], RxStatus.PENDING)
        self.assertEqual(resp.data["refills_remaining"], 0)
        resp = self.client.post(reverse("prescription-refill", args=[rx_id]))
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)

    def test_bill_prices_from_inventory(self):
        rx_id = self.prescribe().data["id"]
        resp = self.client.post(reverse("prescription-bill", args=[rx_id]))
        self.assertTrue(resp.data["is_billed"])
        self.assertEqual(resp.data["payment_status"], PaymentStatus.PENDING_PAYMENT)
        invoice = Invoice.objects.get(pk=resp.data["invoice"])
        self.assertEqual(str(invoice.total_amount), "35.00")
        self.assertEqual(self.client.post(reverse("prescription-bill", args=[rx_id])).status_code, status.HTTP_409_CONFLICT)


@override_settings(LOW_STOCK_THRESHOLD=10)
class CheckLowStockCommandTests(TestCase):
    def test_reports_and_logs(self):
        Medication.objects.create(name="Few", stock=3)
        Medication.objects.create(name="Gone", stock=0)
        out = StringIO()
        call_command("check_low_stock", "--log", stdout=out)
        self.assertIn("1 low stock, 1 out of stock", out.getvalue())
        self.assertTrue(ActivityLog.objects.filter(action="Stock check: 1 low stock, 1 out of stock").exists())

    def test_all_stocked(self):
        Medication.objects.create(name="Plenty", stock=50)
        out = StringIO()
        call_command("check_low_stock", stdout=out)
        self.assertIn("sufficiently stocked", out.getvalue())
