import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Shift",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("staff_name", models.CharField(max_length=255)),
                ("date", models.DateField()),
                ("shift_type", models.CharField(choices=[("DAY", "Day"), ("NIGHT", "Night"), ("DAY_OFF", "Day Off"), ("CUSTOM", "Custom")], max_length=16)),
                ("start_time", models.TimeField(blank=True, null=True)),
                ("end_time", models.TimeField(blank=True, null=True)),
                ("notes", models.TextField(blank=True)),
                ("attendance_status", models.CharField(choices=[("SCHEDULED", "Scheduled"), ("CLOCKED_IN", "Clocked In"), ("LATE", "Late"), ("CLOCKED_OUT", "Clocked Out"), ("ABSENT", "Absent")], default="SCHEDULED", max_length=16)),
                ("actual_start_time", models.TimeField(blank=True, null=True)),
                ("actual_end_time", models.TimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("staff", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="shifts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["date", "start_time", "id"],
                "indexes": [
                    models.Index(fields=["staff", "date"], name="schedules_s_staff_i_d41a07_idx"),
                    models.Index(fields=["date"], name="schedules_s_date_63b2e9_idx"),
                ],
            },
        ),
    ]
