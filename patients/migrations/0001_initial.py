from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(max_length=120)),
                ("last_name", models.CharField(max_length=120)),
                ("gender", models.CharField(choices=[("MALE", "Male"), ("FEMALE", "Female"), ("OTHER", "Other"), ("PREFER_NOT_TO_SAY", "Prefer not to say")], max_length=32)),
                ("date_of_birth", models.DateField()),
                ("contact_number", models.CharField(max_length=32)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("address", models.JSONField(blank=True, default=dict)),
                ("emergency_contact", models.JSONField(blank=True, default=dict)),
                ("insurance", models.JSONField(blank=True, null=True)),
                ("allergies", models.JSONField(blank=True, default=list)),
                ("current_medications", models.JSONField(blank=True, default=list)),
                ("medical_history_notes", models.TextField(blank=True)),
                ("last_visit", models.DateField(blank=True, null=True)),
                ("status", models.CharField(choices=[("ACTIVE", "Active"), ("INACTIVE", "Inactive"), ("PENDING", "Pending")], default="ACTIVE", max_length=16)),
                ("profile_picture_url", models.URLField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
