from django.db import models

class LabStatus(models.TextChoices):
    """Shared by whole orders and by the individual tests on them."""
    PENDING_SAMPLE = "PENDING_SAMPLE","Pending Sample"
    SAMPLE_COLLECTED = "SAMPLE_COLLECTED","Sample Collected"
    PROCESSING = "PROCESSING","Processing"
    PENDING_RESULT = "PENDING_RESULT","Pending Result"
    RESULT_ENTERED = "RESULT_ENTERED","Result Entered"
    AWAITING_VERIFICATION = "AWAITING_VERIFICATION","Awaiting Verification"
    RESULTS_READY = "RESULTS_READY","Results Ready"
    CANCELLED = "CANCELLED","Cancelled"
