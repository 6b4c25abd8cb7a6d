# records/management/commands/seed.py
from django.core.management.base import BaseCommand

from records.services.seed import seed_all


class Command(BaseCommand):
    help = "Insert default roles, police posts and the admin officer into empty tables (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--admin-password', default=None, help='Password for the seeded Admin officer.')

    def handle(self, *args, **opts):
        inserted = seed_all(opts['admin_password'])
        for table, count in inserted.items():
            if count:
                self.stdout.write(self.style.SUCCESS(f"seeded {table}: {count}"))
            else:
                self.stdout.write(f"skipped {table}: already populated")
        self.stdout.write(self.style.SUCCESS("Seed complete."))
