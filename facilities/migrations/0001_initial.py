import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Ward",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("description", models.CharField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Bed",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("label", models.CharField(max_length=50)),
                ("status", models.CharField(choices=[("AVAILABLE", "Available"), ("OCCUPIED", "Occupied"), ("NEEDS_CLEANING", "Needs Cleaning"), ("MAINTENANCE", "Maintenance")], default="AVAILABLE", max_length=16)),
                ("patient_name", models.CharField(blank=True, max_length=255)),
                ("patient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="beds", to="patients.patient")),
                ("ward", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="beds", to="facilities.ward")),
            ],
            options={
                "ordering": ["ward_id", "id"],
                "unique_together": {("ward", "label")},
            },
        ),
        migrations.CreateModel(
            name="Admission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("patient_name", models.CharField(max_length=255)),
                ("ward_name", models.CharField(blank=True, max_length=100)),
                ("bed_label", models.CharField(blank=True, max_length=50)),
                ("admission_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("reason_for_admission", models.TextField()),
                ("primary_doctor", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(choices=[("ADMITTED", "Admitted"), ("PENDING_DISCHARGE", "Pending Discharge"), ("OBSERVATION", "Observation"), ("DISCHARGED", "Discharged")], default="ADMITTED", max_length=20)),
                ("discharge_date", models.DateTimeField(blank=True, null=True)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("bed", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="admissions", to="facilities.bed")),
                ("patient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="admissions", to="patients.patient")),
                ("ward", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="admissions", to="facilities.ward")),
            ],
            options={
                "ordering": ["-admission_date", "-id"],
                "indexes": [
                    models.Index(fields=["patient", "admission_date"], name="facilities__patient_a8d2c4_idx"),
                    models.Index(fields=["status"], name="facilities__status_5f03be_idx"),
                ],
            },
        ),
    ]
