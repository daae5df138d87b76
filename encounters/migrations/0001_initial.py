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
            name="Consultation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("patient_name", models.CharField(max_length=255)),
                ("doctor_name", models.CharField(max_length=255)),
                ("consultation_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("presenting_complaint", models.TextField()),
                ("history_of_presenting_complaint", models.TextField(blank=True)),
                ("past_medical_history", models.TextField(blank=True)),
                ("medication_history", models.TextField(blank=True)),
                ("allergies", models.TextField(blank=True)),
                ("family_history", models.TextField(blank=True)),
                ("social_history", models.TextField(blank=True)),
                ("review_of_systems", models.TextField(blank=True)),
                ("examination_findings", models.TextField(blank=True)),
                ("assessment_diagnosis", models.TextField()),
                ("plan", models.TextField()),
                ("status", models.CharField(choices=[("OPEN", "Open"), ("CLOSED", "Closed"), ("FOLLOW_UP_REQUIRED", "Follow-up Required")], default="OPEN", max_length=24)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("patient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="consultations", to="patients.patient")),
            ],
            options={
                "ordering": ["-consultation_date", "-id"],
                "indexes": [models.Index(fields=["patient", "consultation_date"], name="encounters__patient_0e4f7b_idx")],
            },
        ),
    ]
