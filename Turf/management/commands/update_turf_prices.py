import logging

from django.core.management.base import BaseCommand, CommandError

from Turf.models import Turf

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Set the base price of every turf."

    def add_arguments(self, parser):
        parser.add_argument("--price", type=int, default=500)

    def handle(self, *args, **options):
        price = options["price"]
        if price <= 0:
            raise CommandError("Price must be greater than zero")

        updated = Turf.objects.update(price=price)
        self.stdout.write(self.style.SUCCESS(f"Updated {updated} turf(s) to {price}"))
        logger.info("Updated %d turf base prices to %d", updated, price)
