import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("patients", "0001_initial"),
        ("billing", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Appointment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("patient_name", models.CharField(max_length=255)),
                ("provider_name", models.CharField(max_length=255)),
                ("date", models.DateField()),
                ("time", models.TimeField()),
                ("appt_type", models.CharField(choices=[("CHECK_UP", "Check-up"), ("CONSULTATION", "Consultation"), ("FOLLOW_UP", "Follow-up"), ("PROCEDURE", "Procedure")], default="CONSULTATION", max_length=16)),
                ("status", models.CharField(choices=[("SCHEDULED", "Scheduled"), ("CONFIRMED", "Confirmed"), ("CANCELLED", "Cancelled"), ("COMPLETED", "Completed"), ("ARRIVED", "Arrived")], default="SCHEDULED", max_length=16)),
                ("notes", models.TextField(blank=True)),
                ("payment_status", models.CharField(choices=[("PENDING_PAYMENT", "Pending Payment"), ("PARTIALLY_PAID", "Partially Paid"), ("PAID", "Paid"), ("BILLED", "Billed"), ("N_A", "N/A")], default="N_A", max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="appointments_created", to=settings.AUTH_USER_MODEL)),
                ("invoice", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="appointments", to="billing.invoice")),
                ("patient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="appointments", to="patients.patient")),
                ("provider", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="appointments_provided", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-date", "-time", "-id"],
                "indexes": [
                    models.Index(fields=["provider", "date", "time"], name="appointment_provide_3f9b1c_idx"),
                    models.Index(fields=["patient", "date"], name="appointment_patient_7a2e40_idx"),
                    models.Index(fields=["status"], name="appointment_status_c51d88_idx"),
                ],
            },
        ),
    ]
