import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from Accounts.models import AdminAllowlist
from Turf.models import Turf

logger = logging.getLogger(__name__)

DEFAULT_AMENITIES = ["Parking", "Floodlights", "Washroom", "Equipments"]

DEFAULT_TURFS = [
    {
        "name": f"Pavallion Sports Arena T{n}",
        "location": "Mira Bhayandar",
        "price": 500,
        "amenities": DEFAULT_AMENITIES,
        "image_id": f"turf-{n}",
    }
    for n in (1, 2, 3)
]


class Command(BaseCommand):
    help = "Write the admin allowlist and seed default turfs when none exist."

    def handle(self, *args, **options):
        admin_emails = settings.TURF_BOOKING.get("ADMIN_EMAILS", [])
        if not admin_emails:
            raise CommandError(
                "No admin e-mails configured. Set TURF_ADMIN_EMAILS, e.g. "
                'TURF_ADMIN_EMAILS="admin@example.com"'
            )

        with transaction.atomic():
            allowlist = AdminAllowlist.load_for_update()
            allowlist.emails = list(set(allowlist.emails) | set(admin_emails))
            allowlist.save()
        self.stdout.write(f"Admin allowlist: {', '.join(allowlist.emails)}")
        logger.info("Admin allowlist updated (%d e-mails)", len(allowlist.emails))

        if Turf.objects.exists():
            self.stdout.write("Turfs already exist, skipping turf seed.")
            return

        Turf.objects.bulk_create(Turf(**data) for data in DEFAULT_TURFS)
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(DEFAULT_TURFS)} default turfs"))
        logger.info("Seeded %d default turfs", len(DEFAULT_TURFS))
