from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from core.employees.management.commands.seed_employees import EMPLOYEES
from core.employees.models import Employee


class SeedEmployeesCommandTests(TestCase):
    def test_seed_creates_demo_employees_once(self):
        out = StringIO()
        call_command("seed_employees", stdout=out)

        self.assertEqual(Employee.objects.count(), len(EMPLOYEES))
        self.assertIn(f"{len(EMPLOYEES)} Mitarbeiter angelegt.", out.getvalue())

        out = StringIO()
        call_command("seed_employees", stdout=out)

        self.assertEqual(Employee.objects.count(), len(EMPLOYEES))
        self.assertIn("0 Mitarbeiter angelegt.", out.getvalue())

    def test_dry_run_saves_nothing(self):
        out = StringIO()
        call_command("seed_employees", "--dry-run", stdout=out)

        self.assertFalse(Employee.objects.exists())
        self.assertIn("ann.lee@example.com: valid", out.getvalue())
