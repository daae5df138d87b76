from django.db import models


class AppSetting(models.Model):
    """
    One application-wide configuration value (theme colours, currency, clinic hours...).
    Keys without a row fall back to system_admin.services.DEFAULTS.
    """
    key = models.CharField(max_length=64, unique=True)
    value = models.JSONField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return f"{self.key}={self.value!r}"
