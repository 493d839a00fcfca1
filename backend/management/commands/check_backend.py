"""Management command to diagnose backend connectivity.

Usage:
    python manage.py check_backend [--collection locations]

Reports configuration status, then reads one document from each
configured collection. Exits with non-zero status if any probe fails.
"""
from django.core.management.base import BaseCommand, CommandError
from django.conf import settings
from backend.client import BackendConfigError, BackendError, api_get

COLLECTIONS = {
    "locations": "BACKEND_LOCATIONS_COLLECTION_ID",
    "students": "BACKEND_STUDENTS_COLLECTION_ID",
    "courses": "BACKEND_COURSES_COLLECTION_ID",
    "attendance": "BACKEND_ATTENDANCE_COLLECTION_ID",
}


class Command(BaseCommand):
    help = "Diagnose backend configuration and collection access"

    def add_arguments(self, parser):
        parser.add_argument(
            "--collection",
            dest="collections",
            action="append",
            choices=sorted(COLLECTIONS),
            help="Only probe the given collection (repeatable)",
        )

    def handle(self, *args, **options):
        names = options["collections"] or list(COLLECTIONS)
        self.stdout.write("== Backend Diagnostics ==")
        self.stdout.write(f"Endpoint: {settings.BACKEND_ENDPOINT or '(unset)'}")
        self.stdout.write(
            "Project: "
            + (settings.BACKEND_PROJECT_ID or "(unset)")
            + " | Key: "
            + (settings.BACKEND_API_KEY[:6] + "…" if settings.BACKEND_API_KEY else "(unset)")
        )
        self.stdout.write(f"Database: {settings.BACKEND_DATABASE_ID or '(unset)'}")

        failures = []
        for name in names:
            collection_id = getattr(settings, COLLECTIONS[name], "")
            if not collection_id:
                self.stdout.write(self.style.ERROR(f"{name}: collection id not set ({COLLECTIONS[name]})"))
                failures.append(name)
                continue
            self.stdout.write(f"Probing {name} ({collection_id}) read (limit 1)...")
            try:
                res = api_get(
                    f"collections/{collection_id}/documents",
                    params={"queries[]": ["limit(1)"]},
                )
            except BackendConfigError as e:
                raise CommandError(f"Configuration error: {e}")
            except BackendError as e:
                self.stdout.write(self.style.ERROR(f"{name} read failed: {e}"))
                failures.append(name)
                continue
            total = (res or {}).get("total", 0)
            self.stdout.write(self.style.SUCCESS(f"{name} read OK (total {total})"))

        if failures:
            raise CommandError("Probes failed: " + ", ".join(failures))
        self.stdout.write("== Done ==")
