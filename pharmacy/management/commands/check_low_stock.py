"""
Report medications below the reorder threshold.

Usage:
    python manage.py check_low_stock             # low and out-of-stock items
    python manage.py check_low_stock --log       # also record one activity-log entry
"""
from django.core.management.base import BaseCommand

from audit.services import log_activity
from pharmacy.enums import StockStatus
from pharmacy.services.inventory import low_stock, low_stock_threshold


class Command(BaseCommand):
    help = "List medications that are low on stock or out of stock"

    def add_arguments(self, parser):
        parser.add_argument(
            "--log",
            action="store_true",
            help="Record a summary in the activity log",
        )

    def handle(self, *args, **options):
        items = list(low_stock())
        self.stdout.write(f"Reorder threshold: {low_stock_threshold()}")
        out = 0
        for med in items:
            if med.status == StockStatus.OUT_OF_STOCK:
                out += 1
                self.stdout.write(self.style.ERROR(f"  OUT OF STOCK: {med.name} {med.dosage}".rstrip()))
            else:
                self.stdout.write(self.style.WARNING(f"  LOW STOCK: {med.name} {med.dosage} (current: {med.stock})"))

        if not items:
            self.stdout.write(self.style.SUCCESS("All medications are sufficiently stocked."))
            return

        summary = f"{len(items) - out} low stock, {out} out of stock"
        self.stdout.write(summary)
        if options["log"]:
            log_activity(action=f"Stock check: {summary}", target_type="Medication", icon="AlertTriangle")
