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
            name="LabOrder",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order_number", models.CharField(max_length=32, unique=True)),
                ("patient_name", models.CharField(max_length=255)),
                ("ordering_doctor", models.CharField(max_length=255)),
                ("order_date", models.DateTimeField()),
                ("tests", models.JSONField(default=list)),
                ("status", models.CharField(choices=[("PENDING_SAMPLE", "Pending Sample"), ("SAMPLE_COLLECTED", "Sample Collected"), ("PROCESSING", "Processing"), ("PENDING_RESULT", "Pending Result"), ("RESULT_ENTERED", "Result Entered"), ("AWAITING_VERIFICATION", "Awaiting Verification"), ("RESULTS_READY", "Results Ready"), ("CANCELLED", "Cancelled")], default="PENDING_SAMPLE", max_length=24)),
                ("clinical_notes", models.TextField(blank=True)),
                ("sample_collection_date", models.DateTimeField(blank=True, null=True)),
                ("sample_collector", models.CharField(blank=True, max_length=255)),
                ("verification_date", models.DateTimeField(blank=True, null=True)),
                ("verified_by", models.CharField(blank=True, max_length=255)),
                ("payment_status", models.CharField(choices=[("PENDING_PAYMENT", "Pending Payment"), ("PARTIALLY_PAID", "Partially Paid"), ("PAID", "Paid"), ("BILLED", "Billed"), ("N_A", "N/A")], default="PENDING_PAYMENT", max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("invoice", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="lab_orders", to="billing.invoice")),
                ("ordered_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="lab_orders_created", to=settings.AUTH_USER_MODEL)),
                ("patient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="lab_orders", to="patients.patient")),
            ],
            options={
                "ordering": ["-order_date", "-id"],
                "indexes": [
                    models.Index(fields=["patient", "order_date"], name="labs_labord_patient_4b8e21_idx"),
                    models.Index(fields=["status"], name="labs_labord_status_91c3fa_idx"),
                ],
            },
        ),
    ]
