"""
Integration tests for invoices and the price lists.
"""
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.enums import UserRole
from audit.models import ActivityLog
from billing.containers import InvoiceContainer
from billing.enums import InvoiceStatus, PaymentStatus, PriceCategory
from billing.models import Invoice, PriceItem
from core.tests.factories import make_patient, make_user
from labs.models import LabOrder


class InvoiceTests(APITestCase):
    def setUp(self):
        self.user = make_user()
        self.patient = make_patient()
        self.client.force_authenticate(self.user)

    def create_invoice(self, **overrides):
        payload = {
            "patient": self.patient.pk,
            "line_items": [{"description": "Consultation", "quantity": 1, "unit_price": "75.00"}],
            "status": InvoiceStatus.PENDING_PAYMENT,
        }
        payload.update(overrides)
        return self.client.post(reverse("invoice-list"), payload, format="json")

    def test_create_numbers_and_totals(self):
        resp = self.create_invoice()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertRegex(resp.data["invoice_number"], r"^INV\d{4}-00001$")
        self.assertEqual(resp.data["patient_name"], "Jane Doe")
        self.assertEqual(resp.data["total_amount"], "75.00")
        self.assertEqual(resp.data["balance"], "75.00")
        self.assertEqual(resp.data["line_items"][0]["total"], "75.00")

    def test_tax_is_added_to_total(self):
        resp = self.create_invoice(
            line_items=[{"description": "Dressing", "quantity": 2, "unit_price": "10.00"}],
            tax_rate="10.00",
        )
        self.assertEqual(resp.data["sub_total"], "20.00")
        self.assertEqual(resp.data["tax_amount"], "2.00")
        self.assertEqual(resp.data["total_amount"], "22.00")

    def test_replacing_line_items_recomputes_totals(self):
        invoice_id = self.create_invoice(tax_rate="10.00").data["id"]
        resp = self.client.patch(
            reverse("invoice-detail", args=[invoice_id]),
            {"line_items": [{"description": "Dressing", "quantity": 1, "unit_price": "20.00"}]},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["sub_total"], "20.00")
        self.assertEqual(resp.data["tax_amount"], "2.00")
        self.assertEqual(resp.data["total_amount"], "22.00")

    def test_empty_line_items_rejected(self):
        resp = self.create_invoice(line_items=[])
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Invoice.objects.exists())

    def test_payment_update_logs_one_entry(self):
        invoice_id = self.create_invoice().data["id"]
        before = ActivityLog.objects.count()

        invoice = InvoiceContainer(actor=self.user).update(
            invoice_id, {"amount_paid": Decimal("75"), "status": InvoiceStatus.PAID}
        )
        self.assertEqual(invoice.amount_paid, Decimal("75.00"))
        self.assertEqual(invoice.status, InvoiceStatus.PAID)
        self.assertEqual(ActivityLog.objects.count(), before + 1)
        entry = ActivityLog.objects.order_by("-id").first()
        self.assertEqual(entry.target_id, str(invoice_id))
        self.assertIn("Payment updated to USD 75.00", entry.action)

    def test_paying_cascades_to_billed_records(self):
        invoice_id = self.create_invoice().data["id"]
        order = LabOrder.objects.create(
            order_number="LAB2024-01-00001", patient=self.patient, patient_name=self.patient.name,
            ordering_doctor="Dr. Who", order_date=timezone.now(), tests=[], invoice_id=invoice_id,
        )
        resp = self.client.patch(
            reverse("invoice-detail", args=[invoice_id]),
            {"amount_paid": "75.00", "status": InvoiceStatus.PAID}, format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        order.refresh_from_db()
        self.assertEqual(order.payment_status, PaymentStatus.PAID)

    def test_only_draft_or_cancelled_can_be_deleted(self):
        invoice_id = self.create_invoice().data["id"]
        resp = self.client.delete(reverse("invoice-detail", args=[invoice_id]))
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)

        Invoice.objects.filter(pk=invoice_id).update(status=InvoiceStatus.CANCELLED)
        resp = self.client.delete(reverse("invoice-detail", args=[invoice_id]))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)

    def test_filter_by_status(self):
        self.create_invoice()
        self.create_invoice(status=InvoiceStatus.DRAFT)
        resp = self.client.get(reverse("invoice-list"), {"status": InvoiceStatus.DRAFT})
        self.assertEqual(len(resp.data), 1)


class PricingTests(APITestCase):
    def setUp(self):
        self.admin = make_user()
        self.client.force_authenticate(self.admin)

    def test_general_fees_defaults_and_merge(self):
        url = reverse("pricing-general-fees")
        resp = self.client.get(url)
        self.assertEqual(resp.data["consultation_fee"], "75.00")
        self.assertEqual(resp.data["checkup_fee"], "50.00")

        resp = self.client.post(url, {"checkup_fee": "60.00"}, format="json")
        self.assertEqual(resp.data["checkup_fee"], "60.00")
        self.assertEqual(resp.data["consultation_fee"], "75.00")

    def test_non_admin_cannot_change_fees(self):
        self.client.force_authenticate(make_user(email="nurse@clinic.test", role=UserRole.NURSE))
        resp = self.client.post(reverse("pricing-general-fees"), {"checkup_fee": "1.00"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

    def test_lab_test_items(self):
        create_url = reverse("pricing-item-create", args=["lab-tests"])
        resp = self.client.post(create_url, {"name": "CBC", "price": "15.00"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        item_id = resp.data["id"]

        resp = self.client.patch(reverse("pricing-item-detail", args=["lab-tests", item_id]), {"price": "18.50"}, format="json")
        self.assertEqual(resp.data["price"], "18.50")

        listing = self.client.get(reverse("pricing-list", args=["lab-tests"]))
        self.assertEqual([i["name"] for i in listing.data], ["CBC"])

        resp = self.client.delete(reverse("pricing-item-detail", args=["lab-tests", item_id]))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)

    def test_zero_price_rejected_for_new_items(self):
        resp = self.client.post(reverse("pricing-item-create", args=["other-services"]), {"name": "X", "price": "0"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_ward_tariffs_replace_whole_list(self):
        PriceItem.objects.create(category=PriceCategory.WARD_TARIFF, name="Old Ward", price="10.00")
        resp = self.client.post(
            reverse("pricing-list", args=["ward-tariffs"]),
            [{"ward_name": "General", "per_diem_rate": "40.00"}], format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data, [{"id": resp.data[0]["id"], "ward_name": "General", "per_diem_rate": "40.00"}])
        self.assertFalse(PriceItem.objects.filter(name="Old Ward").exists())

    def test_unknown_price_list(self):
        resp = self.client.get(reverse("pricing-list", args=["gadgets"]))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
