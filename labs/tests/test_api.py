"""
Integration tests for lab orders: numbering, automatic billing and the
results-entry status progression.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.enums import UserRole
from billing.enums import InvoiceStatus, PaymentStatus, PriceCategory
from billing.models import Invoice, PriceItem
from core.tests.factories import make_patient, make_user
from labs.enums import LabStatus
from labs.models import LabOrder


class LabOrderTests(APITestCase):
    def setUp(self):
        self.tech = make_user(email="lab@clinic.test", role=UserRole.LAB_TECHNICIAN, first_name="Lab", last_name="Tech")
        self.patient = make_patient()
        PriceItem.objects.create(category=PriceCategory.LAB_TEST, name="CBC", price="15.00")
        self.client.force_authenticate(self.tech)

    def order(self, tests=None, **overrides):
        payload = {
            "patient": self.patient.pk,
            "ordering_doctor": "Dr. Who",
            "tests": tests if tests is not None else [{"name": "CBC"}, {"name": "Malaria", "price": "5.00"}],
        }
        payload.update(overrides)
        return self.client.post(reverse("lab-orders-list"), payload, format="json")

    def enter(self, order, **per_test):
        tests = [dict(t, **per_test.get(t["name"], {})) for t in order["tests"]]
        return self.client.post(reverse("lab-orders-results", args=[order["id"]]), {"tests": tests}, format="json")

    def test_create_prices_tests_and_bills(self):
        resp = self.order()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertRegex(resp.data["order_number"], r"^LAB\d{4}-\d{2}-00001$")
        self.assertEqual([t["price"] for t in resp.data["tests"]], ["15.00", "5.00"])
        self.assertTrue(all(t["status"] == LabStatus.PENDING_SAMPLE for t in resp.data["tests"]))
        self.assertEqual(resp.data["payment_status"], PaymentStatus.PENDING_PAYMENT)

        invoice = Invoice.objects.get(pk=resp.data["invoice"])
        self.assertEqual(str(invoice.total_amount), "20.00")
        self.assertEqual(len(invoice.line_items), 2)

    def test_free_order_is_paid_without_invoice(self):
        resp = self.order(tests=[{"name": "Unknown Test"}])
        self.assertIsNone(resp.data["invoice"])
        self.assertEqual(resp.data["payment_status"], PaymentStatus.PAID)

    def test_order_needs_tests(self):
        resp = self.order(tests=[])
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(LabOrder.objects.exists())

    def test_first_entry_marks_sample_collected(self):
        order = self.order().data
        resp = self.enter(order, CBC={"status": LabStatus.SAMPLE_COLLECTED})
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["status"], LabStatus.SAMPLE_COLLECTED)
        self.assertIsNotNone(resp.data["sample_collection_date"])

    def test_all_results_unpaid_awaits_verification(self):
        order = self.order().data
        done = {"status": LabStatus.RESULT_ENTERED, "result": "Normal"}
        resp = self.enter(order, CBC=done, Malaria=done)
        self.assertEqual(resp.data["status"], LabStatus.AWAITING_VERIFICATION)
        self.assertEqual([t["price"] for t in resp.data["tests"]], ["15.00", "5.00"])

    def test_all_results_paid_is_ready_and_verified(self):
        order = self.order().data
        invoice = Invoice.objects.get(pk=order["invoice"])
        invoice.status = InvoiceStatus.PAID
        invoice.save()

        done = {"status": LabStatus.RESULT_ENTERED, "result": "Negative"}
        resp = self.enter(order, CBC=done, Malaria=done)
        self.assertEqual(resp.data["payment_status"], PaymentStatus.PAID)
        self.assertEqual(resp.data["status"], LabStatus.RESULTS_READY)
        self.assertEqual(resp.data["verified_by"], "Lab Tech")

    def test_receptionist_cannot_enter_results(self):
        order = self.order().data
        self.client.force_authenticate(make_user(email="desk@clinic.test", role=UserRole.RECEPTIONIST))
        resp = self.enter(order)
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
