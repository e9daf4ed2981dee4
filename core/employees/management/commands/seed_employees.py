from django.core.management.base import BaseCommand

from core.employees.services import EmployeeDirectoryService, OutcomeKind

EMPLOYEES = [
    {
        "full_name": "Ann Lee",
        "department": "Finance",
        "email": "ann.lee@example.com",
        "phone": "+1 555 0100",
    },
    {
        "full_name": "Carlos Mendes",
        "department": "Information Technology",
        "email": "carlos.mendes@example.com",
        "phone": "+1 555 0101",
    },
    {
        "full_name": "Priya Natarajan",
        "department": "Research and Development",
        "email": "priya.natarajan@example.com",
    },
    {
        "full_name": "Tomasz Nowak",
        "department": "Operations",
        "email": "tomasz.nowak@example.com",
        "address": "12 Harbour Road, Springfield",
    },
    {
        "full_name": "Grace Okafor",
        "department": "Human Resources",
        "email": "grace.okafor@example.com",
    },
]


class Command(BaseCommand):
    help = "Legt Demo-Mitarbeiter an. Bereits vergebene E-Mail-Adressen werden übersprungen."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only validate the demo records, do not save them.",
        )

    def handle(self, *args, **options):
        service = EmployeeDirectoryService.default()
        created = 0
        for employee_data in EMPLOYEES:
            data = dict(employee_data)

            if options["dry_run"]:
                form = service.build_form(data)
                status = "valid" if form.is_valid() else f"invalid: {form.errors.as_text()}"
                self.stdout.write(f"{employee_data['email']}: {status}")
                continue

            outcome = service.create(data)
            if outcome.ok:
                created += 1
                self.stdout.write(
                    self.style.SUCCESS(f"Employee {outcome.employee.full_name} angelegt.")
                )
            elif outcome.kind is OutcomeKind.INVALID:
                self.stdout.write(
                    self.style.WARNING(
                        f"{employee_data['email']} übersprungen: {outcome.form.errors.as_text()}"
                    )
                )
            else:
                self.stderr.write(
                    self.style.ERROR(f"{employee_data['email']} konnte nicht gespeichert werden.")
                )

        self.stdout.write(self.style.SUCCESS(f"{created} Mitarbeiter angelegt."))
