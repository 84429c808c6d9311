import json

from django.core.management.base import BaseCommand, CommandError

from integrations.pi8.client import Pi8APIError, Pi8Client
from integrations.pi8.services import ImovelImportError, ImovelImportService


class Command(BaseCommand):
    help = "Import published properties from the Pi8 API (create new, update existing)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Fetch and display the published list without writing imoveis",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]

        try:
            client = Pi8Client()
        except Pi8APIError as exc:
            raise CommandError(str(exc)) from exc

        if dry_run:
            self.stdout.write("=== DRY RUN: Fetching published properties ===")
            try:
                summaries = client.fetch_published_summaries()
            except Pi8APIError as exc:
                raise CommandError(f"Failed to fetch published properties: {exc}") from exc
            self.stdout.write(json.dumps(summaries[:5], indent=2, default=str))
            self.stdout.write(f"{len(summaries)} published properties")
            self.stdout.write("=== End dry run ===")
            return

        self.stdout.write("Importing properties from Pi8...")
        service = ImovelImportService(client=client)
        try:
            result = service.sync()
        except ImovelImportError as exc:
            raise CommandError(f"Import aborted: {exc}") from exc

        summary = (
            f"Import completed: {result['fetched']} fetched, "
            f"{result['created']} created, {result['updated']} updated, "
            f"{result['failed']} failed"
        )
        if result["failed"]:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))
