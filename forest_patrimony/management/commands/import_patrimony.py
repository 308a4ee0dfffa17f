import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from forest_patrimony.importing.levels import LEVELS
from forest_patrimony.importing.services import ImportServiceError, import_patrimony_file
from forest_patrimony.importing.types import AuthorizationScope


class Command(BaseCommand):
    help = "Import one patrimony level from a CSV or XLSX file."

    def add_arguments(self, parser):
        parser.add_argument("path", help="CSV or XLSX file to import")
        parser.add_argument(
            "--level",
            required=True,
            choices=sorted(LEVELS),
            help="Hierarchy level the rows belong to",
        )
        parser.add_argument(
            "--parent",
            default=None,
            help="Parent record id (required for levels 3, 4 and 5)",
        )
        parser.add_argument(
            "--organization",
            default=None,
            help="Owning organization id used as the tenant scope",
        )
        parser.add_argument(
            "--privileged",
            action="store_true",
            help="Match records across every organization",
        )
        parser.add_argument(
            "--strict-enums",
            action="store_true",
            help="Reject rows with unrecognized enumerated values instead of using defaults",
        )

    def handle(self, *args, **options):
        path = Path(options["path"])
        if not path.is_file():
            raise CommandError(f"File not found: {path}")

        scope = AuthorizationScope(
            is_privileged=options["privileged"],
            tenant_id=options["organization"],
        )
        try:
            with path.open("rb") as handle:
                outcome = import_patrimony_file(
                    handle,
                    level=options["level"],
                    scope=scope,
                    parent_id=options["parent"],
                    file_name=path.name,
                    strict_enums=options["strict_enums"] or None,
                )
        except ImportServiceError as exc:
            raise CommandError(f"{exc.code}: {exc.message}") from exc

        self.stdout.write(json.dumps(outcome, indent=2, ensure_ascii=False))
        if outcome["skipped"]:
            self.stderr.write(
                self.style.WARNING(f"{outcome['skipped']} row(s) were skipped.")
            )
        else:
            self.stdout.write(self.style.SUCCESS("Import completed."))
