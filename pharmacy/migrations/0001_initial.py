import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
        ("billing", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Medication",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("dosage", models.CharField(blank=True, max_length=64)),
                ("category", models.CharField(blank=True, max_length=120)),
                ("stock", models.IntegerField(default=0)),
                ("expiry_date", models.DateField(blank=True, null=True)),
                ("supplier", models.CharField(blank=True, max_length=255)),
                ("price_per_unit", models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("status", models.CharField(choices=[("IN_STOCK", "In Stock"), ("LOW_STOCK", "Low Stock"), ("OUT_OF_STOCK", "Out of Stock")], default="OUT_OF_STOCK", editable=False, max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name", "id"],
                "indexes": [models.Index(fields=["status"], name="pharmacy_me_status_2d7b0e_idx")],
            },
        ),
        migrations.CreateModel(
            name="Prescription",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("patient_name", models.CharField(max_length=255)),
                ("medication_name", models.CharField(max_length=255)),
                ("dosage", models.CharField(max_length=64)),
                ("quantity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("instructions", models.TextField(blank=True)),
                ("prescribed_by", models.CharField(max_length=255)),
                ("date", models.DateField(default=django.utils.timezone.localdate)),
                ("status", models.CharField(choices=[("PENDING", "Pending"), ("FILLED", "Filled"), ("READY_FOR_PICKUP", "Ready for Pickup"), ("DISPENSED", "Dispensed"), ("CANCELLED", "Cancelled")], default="PENDING", max_length=24)),
                ("is_billed", models.BooleanField(default=False)),
                ("payment_status", models.CharField(choices=[("PENDING_PAYMENT", "Pending Payment"), ("PARTIALLY_PAID", "Partially Paid"), ("PAID", "Paid"), ("BILLED", "Billed"), ("N_A", "N/A")], default="N_A", max_length=16)),
                ("refillable", models.BooleanField(default=False)),
                ("refills_remaining", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("invoice", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="prescriptions", to="billing.invoice")),
                ("patient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="prescriptions", to="patients.patient")),
            ],
            options={
                "ordering": ["-date", "-id"],
                "indexes": [
                    models.Index(fields=["patient", "date"], name="pharmacy_pr_patient_6e1a93_idx"),
                    models.Index(fields=["status"], name="pharmacy_pr_status_b40f5c_idx"),
                ],
            },
        ),
    ]
