from django.core.management.base import BaseCommand, CommandError

from jobboard.health import probe_database


class Command(BaseCommand):
    help = 'Check the database connection and report the number of users.'

    def handle(self, *args, **options):
        probe = probe_database()
        if not probe.success:
            raise CommandError(f"Database connection failed: {probe.error}")

        self.stdout.write(self.style.SUCCESS('Database connected successfully'))
        self.stdout.write(f"Total users in database: {probe.user_count}")
