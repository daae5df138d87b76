import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="GeneralFees",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("consultation_fee", models.DecimalField(decimal_places=2, default=Decimal("75.00"), max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("checkup_fee", models.DecimalField(decimal_places=2, default=Decimal("50.00"), max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name_plural": "general fees",
            },
        ),
        migrations.CreateModel(
            name="PriceItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("category", models.CharField(choices=[("LAB_TEST", "Lab Test"), ("OTHER_SERVICE", "Other Service"), ("WARD_TARIFF", "Ward Tariff")], max_length=16)),
                ("name", models.CharField(max_length=160)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
            ],
            options={
                "ordering": ["category", "name", "id"],
            },
        ),
        migrations.CreateModel(
            name="Invoice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("invoice_number", models.CharField(max_length=32, unique=True)),
                ("patient_name", models.CharField(max_length=255)),
                ("date", models.DateField()),
                ("due_date", models.DateField()),
                ("line_items", models.JSONField(default=list)),
                ("sub_total", models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("tax_rate", models.DecimalField(decimal_places=2, default=0, max_digits=5, validators=[django.core.validators.MinValueValidator(0)])),
                ("tax_amount", models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("total_amount", models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("amount_paid", models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("status", models.CharField(choices=[("DRAFT", "Draft"), ("PENDING_PAYMENT", "Pending Payment"), ("PARTIALLY_PAID", "Partially Paid"), ("PAID", "Paid"), ("OVERDUE", "Overdue"), ("CANCELLED", "Cancelled"), ("AWAITING_PUSH_PAYMENT", "Awaiting Push Payment"), ("BILLED", "Billed")], default="PENDING_PAYMENT", max_length=24)),
                ("notes", models.TextField(blank=True)),
                ("source", models.CharField(blank=True, max_length=64)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("patient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="invoices", to="patients.patient")),
            ],
            options={
                "ordering": ["-date", "-id"],
            },
        ),
    ]
