from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Sequence",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("prefix", models.CharField(max_length=16)),
                ("period", models.CharField(max_length=16)),
                ("value", models.PositiveIntegerField(default=0)),
            ],
            options={
                "unique_together": {("prefix", "period")},
            },
        ),
    ]
