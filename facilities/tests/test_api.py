"""
Integration tests for wards, beds and admissions.
"""
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.enums import UserRole
from audit.models import ActivityLog
from core.exceptions import ConflictError
from core.tests.factories import make_patient, make_user
from facilities.containers import WardContainer
from facilities.enums import AdmissionStatus, BedStatus
from facilities.models import Admission, Bed, Ward
from facilities.services import wards


class WardTests(APITestCase):
    def setUp(self):
        self.admin = make_user()
        self.client.force_authenticate(self.admin)

    def create_ward(self, name="General", beds=3):
        return self.client.post(reverse("ward-list"), {"name": name, "desired_bed_count": beds}, format="json")

    def test_create_with_beds(self):
        resp = self.create_ward()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual([b["label"] for b in resp.data["beds"]], ["Bed 1", "Bed 2", "Bed 3"])
        self.assertEqual(resp.data["occupancy"]["total"], 3)
        self.assertEqual(resp.data["occupancy"]["available"], 3)
        self.assertTrue(ActivityLog.objects.filter(action="Created ward General with 3 beds").exists())

    def test_duplicate_name_conflicts(self):
        self.create_ward()
        resp = self.create_ward(name="general")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["message"], 'Ward with name "general" already exists')

    def test_name_length_validated(self):
        resp = self.create_ward(name="x" * 101)
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_resize_grows_after_highest_number_and_shrinks_free_beds(self):
        ward_id = self.create_ward(beds=2).data["id"]
        Bed.objects.filter(ward_id=ward_id, label="Bed 1").update(status=BedStatus.OCCUPIED)

        resp = self.client.patch(reverse("ward-detail", args=[ward_id]), {"desired_bed_count": 4}, format="json")
        self.assertEqual([b["label"] for b in resp.data["beds"]], ["Bed 1", "Bed 2", "Bed 3", "Bed 4"])

        resp = self.client.patch(reverse("ward-detail", args=[ward_id]), {"desired_bed_count": 0}, format="json")
        self.assertEqual([b["label"] for b in resp.data["beds"]], ["Bed 1"])

    def test_add_and_remove_bed(self):
        ward_id = self.create_ward(beds=1).data["id"]
        beds_url = reverse("ward-beds-list", kwargs={"ward_pk": ward_id})

        resp = self.client.post(beds_url, {"label": "Side Room"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(resp.data["beds"]), 2)
        self.assertEqual(self.client.post(beds_url, {"label": "side room"}, format="json").status_code, status.HTTP_409_CONFLICT)

        bed = Bed.objects.get(ward_id=ward_id, label="Side Room")
        resp = self.client.delete(reverse("ward-beds-detail", kwargs={"ward_pk": ward_id, "pk": bed.pk}))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([b["label"] for b in resp.data["beds"]], ["Bed 1"])
        self.assertTrue(ActivityLog.objects.filter(action="Removed bed Side Room from ward General").exists())

    def test_bed_status_cannot_be_set_to_occupied(self):
        ward_id = self.create_ward(beds=1).data["id"]
        bed = Bed.objects.get(ward_id=ward_id)
        url = reverse("ward-beds-detail", kwargs={"ward_pk": ward_id, "pk": bed.pk})

        self.assertEqual(self.client.patch(url, {"status": BedStatus.OCCUPIED}, format="json").status_code, status.HTTP_409_CONFLICT)
        resp = self.client.patch(url, {"status": BedStatus.MAINTENANCE}, format="json")
        self.assertEqual(resp.data["status"], BedStatus.MAINTENANCE)

    def test_delete_occupied_ward_conflicts(self):
        ward_id = self.create_ward(beds=1).data["id"]
        Bed.objects.filter(ward_id=ward_id).update(status=BedStatus.OCCUPIED)
        resp = self.client.delete(reverse("ward-detail", args=[ward_id]))
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertTrue(Ward.objects.filter(pk=ward_id).exists())

    def test_nurse_cannot_manage_wards(self):
        self.client.force_authenticate(make_user(email="nurse@clinic.test", role=UserRole.NURSE))
        self.assertEqual(self.create_ward().status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.get(reverse("ward-list")).status_code, status.HTTP_200_OK)


class WardContainerTests(TestCase):
    def test_failed_delete_leaves_items_unchanged(self):
        ward = wards.create_ward({"name": "ICU", "desired_bed_count": 2})
        Bed.objects.filter(ward=ward).update(status=BedStatus.OCCUPIED)
        container = WardContainer()
        container.fetch_all()

        with self.assertRaises(ConflictError):
            container.remove(ward.pk)
        self.assertEqual([w.pk for w in container.items], [ward.pk])
        self.assertEqual(container.error, 'Ward "ICU" has occupied beds and cannot be deleted.')
        self.assertFalse(ActivityLog.objects.exists())


class AdmissionTests(APITestCase):
    def setUp(self):
        self.nurse = make_user(email="nurse@clinic.test", role=UserRole.NURSE)
        self.patient = make_patient()
        self.ward = wards.create_ward({"name": "General", "desired_bed_count": 2})
        self.bed1, self.bed2 = list(self.ward.beds.order_by("id"))
        self.client.force_authenticate(self.nurse)

    def admit(self, bed=None):
        return self.client.post(reverse("admission-list"), {
            "patient": self.patient.pk,
            "bed": (bed or self.bed1).pk,
            "reason_for_admission": "Observation after surgery",
            "primary_doctor": "Dr. Who",
        }, format="json")

    def test_admit_occupies_bed(self):
        resp = self.admit()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["ward_name"], "General")
        self.assertEqual(resp.data["bed_label"], "Bed 1")
        self.bed1.refresh_from_db()
        self.assertEqual(self.bed1.status, BedStatus.OCCUPIED)
        self.assertEqual(self.bed1.patient_name, "Jane Doe")

    def test_patient_cannot_be_admitted_twice(self):
        self.admit()
        resp = self.admit(bed=self.bed2)
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(Admission.objects.count(), 1)

    def test_taken_bed_conflicts(self):
        self.admit()
        other = make_patient(first_name="Other")
        resp = self.client.post(reverse("admission-list"), {
            "patient": other.pk, "bed": self.bed1.pk, "reason_for_admission": "Fever",
        }, format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)

    def test_transfer_releases_old_bed(self):
        admission_id = self.admit().data["id"]
        resp = self.client.post(reverse("admission-transfer", args=[admission_id]), {"bed": self.bed2.pk}, format="json")
        self.assertEqual(resp.data["bed_label"], "Bed 2")
        self.bed1.refresh_from_db()
        self.bed2.refresh_from_db()
        self.assertEqual(self.bed1.status, BedStatus.NEEDS_CLEANING)
        self.assertIsNone(self.bed1.patient)
        self.assertEqual(self.bed2.status, BedStatus.OCCUPIED)

    def test_discharge_frees_bed(self):
        admission_id = self.admit().data["id"]
        resp = self.client.post(reverse("admission-discharge", args=[admission_id]), {}, format="json")
        self.assertEqual(resp.data["status"], AdmissionStatus.DISCHARGED)
        self.assertIsNotNone(resp.data["discharge_date"])
        self.bed1.refresh_from_db()
        self.assertEqual(self.bed1.status, BedStatus.NEEDS_CLEANING)
        self.assertEqual(
            self.client.post(reverse("admission-discharge", args=[admission_id]), {}, format="json").status_code,
            status.HTTP_409_CONFLICT,
        )

    def test_status_patch_cannot_discharge(self):
        admission_id = self.admit().data["id"]
        resp = self.client.patch(reverse("admission-detail", args=[admission_id]), {"status": AdmissionStatus.DISCHARGED}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        resp = self.client.patch(reverse("admission-detail", args=[admission_id]), {"status": AdmissionStatus.OBSERVATION}, format="json")
        self.assertEqual(resp.data["status"], AdmissionStatus.OBSERVATION)

    def test_discharged_admission_cannot_be_reopened(self):
        admission_id = self.admit().data["id"]
        self.client.post(reverse("admission-discharge", args=[admission_id]), {}, format="json")
        resp = self.client.patch(reverse("admission-detail", args=[admission_id]), {"status": AdmissionStatus.ADMITTED}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(Admission.objects.get(pk=admission_id).status, AdmissionStatus.DISCHARGED)
        self.bed1.refresh_from_db()
        self.assertIsNone(self.bed1.patient)

    def test_receptionist_cannot_admit(self):
        self.client.force_authenticate(make_user(email="desk@clinic.test", role=UserRole.RECEPTIONIST))
        self.assertEqual(self.admit().status_code, status.HTTP_403_FORBIDDEN)
