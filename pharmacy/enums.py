from django.db import models

class StockStatus(models.TextChoices):
    IN_STOCK = "IN_STOCK", "In Stock"
    LOW_STOCK = "LOW_STOCK", "Low Stock"
    OUT_OF_STOCK = "OUT_OF_STOCK", "Out of Stock"

class RxStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    FILLED = "FILLED", "Filled"
    READY_FOR_PICKUP = "READY_FOR_PICKUP", "Ready for Pickup"
    DISPENSED = "DISPENSED", "Dispensed"
    CANCELLED = "CANCELLED", "Cancelled"
