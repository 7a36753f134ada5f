"""Management command that loads the sample brands and products."""

from __future__ import annotations

from django.core.management.base import BaseCommand

from storefront.mongodb import disconnect_mongodb, ensure_mongodb_connection
from storefront.seed import seed_catalog


class Command(BaseCommand):
    help = "Insert 5 sample brands and 7 sample products. Records are duplicated on every run unless --reset is given."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Drop the brands and products collections before inserting.",
        )

    def handle(self, *args, **options):
        ensure_mongodb_connection()
        try:
            result = seed_catalog(reset=options["reset"])
        finally:
            disconnect_mongodb()
        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(result.brands)} brands and {len(result.products)} products."
            )
        )
