from django.test import TestCase, override_settings

from core.employees.departments import DepartmentCatalog
from core.employees.exceptions import ConcurrencyConflict
from core.employees.forms import EmployeeForm
from core.employees.models import Employee
from core.employees.store import EmployeeStore

from .helpers import employee_data, make_employee


class EmployeeStoreTests(TestCase):
    def setUp(self):
        self.store = EmployeeStore()

    def test_ordered_by_full_name(self):
        make_employee(full_name="Mia Park", email="mia@x.com")
        make_employee(full_name="Ann Lee", email="ann@x.com")

        self.assertEqual(
            [e.full_name for e in self.store.ordered()], ["Ann Lee", "Mia Park"]
        )

    def test_find_and_exists(self):
        employee = make_employee()

        self.assertEqual(self.store.find(employee.pk), employee)
        self.assertIsNone(self.store.find(None))
        self.assertIsNone(self.store.find(employee.pk + 1))
        self.assertTrue(self.store.exists(employee.pk))
        self.assertFalse(self.store.exists(employee.pk + 1))

    def test_email_in_use_is_case_insensitive_and_can_exclude(self):
        employee = make_employee(email="Ann@X.com")

        self.assertTrue(self.store.email_in_use("ann@x.com"))
        self.assertTrue(self.store.email_in_use(" ANN@x.COM "))
        self.assertFalse(self.store.email_in_use("ann@x.com", exclude_id=employee.pk))
        self.assertFalse(self.store.email_in_use(""))
        self.assertFalse(self.store.email_in_use(None))

    def test_update_checks_and_bumps_version(self):
        employee = make_employee()
        employee.full_name = "Ann Updated"

        self.store.update(employee, expected_version=1)

        stored = Employee.objects.get(pk=employee.pk)
        self.assertEqual(stored.full_name, "Ann Updated")
        self.assertEqual(stored.row_version, 2)
        self.assertEqual(employee.row_version, 2)

        employee.full_name = "Stale Write"
        with self.assertRaises(ConcurrencyConflict) as ctx:
            self.store.update(employee, expected_version=1)
        self.assertEqual(ctx.exception.employee_id, employee.pk)
        self.assertEqual(Employee.objects.get(pk=employee.pk).full_name, "Ann Updated")

    def test_add_and_remove(self):
        form = EmployeeForm(employee_data(), departments=DepartmentCatalog(["Finance"]))
        self.assertTrue(form.is_valid())

        employee = self.store.add(form.build_employee())
        self.assertTrue(Employee.objects.filter(pk=employee.pk).exists())

        employee_id = employee.pk
        self.store.remove(employee)
        self.assertFalse(Employee.objects.filter(pk=employee_id).exists())


class DepartmentCatalogTests(TestCase):
    def test_default_catalog_has_eight_departments(self):
        catalog = DepartmentCatalog.from_settings()

        choices = catalog.choices()
        self.assertEqual(len(choices), 8)
        self.assertIn(("Customer Service", "Customer Service"), choices)
        self.assertEqual(choices[0], ("Human Resources", "Human Resources"))

    @override_settings(EMPLOYEE_DEPARTMENTS=["Legal", "Finance"])
    def test_catalog_follows_settings(self):
        catalog = DepartmentCatalog.from_settings()

        self.assertEqual(catalog.choices(), [("Legal", "Legal"), ("Finance", "Finance")])
        self.assertNotIn(("Sales", "Sales"), catalog.choices())

    @override_settings(EMPLOYEE_DEPARTMENTS=["Legal"])
    def test_form_rejects_department_missing_from_settings(self):
        form = EmployeeForm(employee_data(department="Finance"))

        self.assertFalse(form.is_valid())
        self.assertIn("department", form.errors)
