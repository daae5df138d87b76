from django.db import models, transaction


class Sequence(models.Model):
    """
    Per-period counter behind human-readable document numbers
    (e.g. INV2024-00001, LAB2024-05-00001).
    """
    prefix = models.CharField(max_length=16)
    period = models.CharField(max_length=16)
    value = models.PositiveIntegerField(default=0)

    class Meta:
        unique_together = ("prefix", "period")

    def __str__(self):
        return f"{self.prefix}{self.period}: {self.value}"

    @classmethod
    def next_value(cls, prefix: str, period: str) -> int:
        with transaction.atomic():
            seq, _ = cls.objects.select_for_update().get_or_create(prefix=prefix, period=period)
            seq.value += 1
            seq.save(update_fields=["value"])
            return seq.value


def next_document_number(prefix: str, period: str) -> str:
    """INV + 2024 -> 'INV2024-00001'."""
    return f"{prefix}{period}-{Sequence.next_value(prefix, period):05d}"
