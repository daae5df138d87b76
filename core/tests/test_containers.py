"""
Tests for the session-scoped entity containers: mutations, activity logging,
listener notification and live sync through model signals.
"""
from django.test import TestCase
from rest_framework.exceptions import NotFound

from audit.enums import Verb
from audit.models import ActivityLog
from core.models import next_document_number
from core.tests.factories import make_patient, make_user
from patients.containers import PatientContainer
from patients.enums import PatientStatus
from patients.models import Patient


class ContainerMutationTests(TestCase):
    def setUp(self):
        self.user = make_user()
        self.container = PatientContainer(actor=self.user)

    def test_create_prepends_and_logs(self):
        make_patient(first_name="Old")
        self.container.fetch_all()
        patient = self.container.create({
            "first_name": "New", "last_name": "Patient", "gender": "MALE",
            "date_of_birth": "1985-01-01", "contact_number": "123",
        })
        self.assertEqual(self.container.items[0].pk, patient.pk)
        self.assertEqual(len(self.container.items), 2)
        entry = ActivityLog.objects.get(target_type="Patient", target_id=str(patient.pk))
        self.assertEqual(entry.verb, Verb.CREATE)
        self.assertEqual(entry.actor, self.user)
        self.assertEqual(entry.target_link, f"/dashboard/patients/{patient.pk}")

    def test_update_replaces_item(self):
        patient = make_patient()
        self.container.fetch_all()
        self.container.update(patient.pk, {"first_name": "Janet"})
        self.assertEqual(self.container.get(patient.pk).first_name, "Janet")
        self.assertIsNone(self.container.error)

    def test_remove_drops_item(self):
        patient = make_patient()
        self.container.fetch_all()
        self.container.remove(patient.pk)
        self.assertEqual(self.container.items, [])
        self.assertTrue(ActivityLog.objects.filter(verb=Verb.DELETE, target_id=str(patient.pk)).exists())

    def test_failed_mutation_sets_error_and_logs_nothing(self):
        patient = make_patient()
        self.container.fetch_all()
        with self.assertRaises(NotFound):
            self.container.remove(patient.pk + 100)
        self.assertEqual(self.container.error, "Patient not found.")
        self.assertEqual([p.pk for p in self.container.items], [patient.pk])
        self.assertFalse(ActivityLog.objects.exists())

    def test_act_logs_custom_action(self):
        patient = make_patient()
        self.container.fetch_all()
        entity = self.container.act(
            lambda pk: Patient.objects.get(pk=pk), patient.pk,
            lambda p: (f"Looked at {p.name}", "Eye"),
        )
        self.assertEqual(entity.pk, patient.pk)
        entry = ActivityLog.objects.get()
        self.assertEqual(entry.verb, Verb.ACTION)
        self.assertEqual(entry.action, "Looked at Jane Doe")


class ContainerListenerTests(TestCase):
    def setUp(self):
        self.container = PatientContainer()
        self.calls = []

    def test_subscribe_and_unsubscribe(self):
        unsubscribe = self.container.subscribe(self.calls.append)
        self.container.fetch_all()
        self.assertEqual(len(self.calls), 1)
        unsubscribe()
        self.container.fetch_all()
        self.assertEqual(len(self.calls), 1)


class ContainerLiveSyncTests(TestCase):
    def setUp(self):
        self.container = PatientContainer()

    def tearDown(self):
        self.container.close()

    def test_open_receives_saved_rows(self):
        self.container.open()
        patient = make_patient()
        self.assertEqual(self.container.items[0].pk, patient.pk)

        Patient.objects.filter(pk=patient.pk).first().delete()
        self.assertEqual(self.container.items, [])

    def test_filtered_container_drops_rows_that_stop_matching(self):
        patient = make_patient()
        self.container.open(status=PatientStatus.ACTIVE)
        self.assertEqual(len(self.container.items), 1)

        patient.status = PatientStatus.INACTIVE
        patient.save()
        self.assertEqual(self.container.items, [])

    def test_closed_container_ignores_changes(self):
        with PatientContainer().open() as container:
            pass
        make_patient()
        self.assertEqual(container.items, [])


class DocumentNumberTests(TestCase):
    def test_numbers_are_sequential_per_period(self):
        self.assertEqual(next_document_number("INV", "2024"), "INV2024-00001")
        self.assertEqual(next_document_number("INV", "2024"), "INV2024-00002")
        self.assertEqual(next_document_number("INV", "2025"), "INV2025-00001")
        self.assertEqual(next_document_number("LAB", "2024-05"), "LAB2024-05-00001")
