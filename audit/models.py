from django.conf import settings
from django.db import models

from .enums import Verb

class ActivityLog(models.Model):
    """
    Append-only "who did what to which entity when" entry.
    """
    # who + request context
    actor = models.ForeignKey(settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="activity_entries")
    actor_role = models.CharField(max_length=64, blank=True)         # snapshot, e.g. "Doctor"
    actor_name = models.CharField(max_length=255)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.TextField(blank=True, null=True)

    # what
    verb = models.CharField(max_length=8, choices=Verb.choices, default=Verb.ACTION)
    action = models.CharField(max_length=255)                         # short human text

    # where (target)
    target_type = models.CharField(max_length=64, blank=True)         # e.g. "Patient", "Invoice"
    target_id = models.CharField(max_length=64, blank=True)
    target_link = models.CharField(max_length=255, blank=True)
    icon = models.CharField(max_length=64, blank=True)

    details = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["created_at"], name="audit_activ_created_0c1f7e_idx"),
            models.Index(fields=["target_type", "target_id"], name="audit_activ_target__5b2d9a_idx"),
            models.Index(fields=["actor_role"], name="audit_activ_actor_r_8e4c21_idx"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.actor_name}: {self.action}"
