"""
Employee Directory Forms

Form used by the create and edit pages. It covers field-level validation
(required fields, lengths, email shape, department membership); email
uniqueness is checked afterwards by the directory service.

Author: Employee Directory Team
Version: 1.0.0
"""

from django import forms

from .departments import DepartmentCatalog
from .models import Employee


class EmployeeForm(forms.Form):
    """
    Formular für Anlegen und Bearbeiten von Mitarbeitern
    """

    id = forms.IntegerField(required=False, widget=forms.HiddenInput)
    row_version = forms.IntegerField(required=False, min_value=1, widget=forms.HiddenInput)
    full_name = forms.CharField(
        max_length=Employee._meta.get_field("full_name").max_length,
        label="Full name",
    )
    department = forms.ChoiceField(label="Department")
    email = forms.EmailField(
        max_length=Employee._meta.get_field("email").max_length,
        label="Email",
    )
    phone = forms.CharField(
        max_length=Employee._meta.get_field("phone").max_length,
        required=False,
        label="Phone",
    )
    address = forms.CharField(
        max_length=Employee._meta.get_field("address").max_length,
        required=False,
        label="Address",
        widget=forms.Textarea(attrs={"rows": 2}),
    )

    def __init__(self, *args, departments: DepartmentCatalog = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.departments = departments if departments is not None else DepartmentCatalog()
        self.fields["department"].choices = [
            ("", "-- Select department --"),
            *self.departments.choices(),
        ]

    @classmethod
    def for_employee(cls, employee: Employee, departments: DepartmentCatalog = None):
        """Unbound form pre-filled with the stored values of ``employee``."""
        return cls(
            initial={
                "id": employee.pk,
                "row_version": employee.row_version,
                "full_name": employee.full_name,
                "department": employee.department,
                "email": employee.email,
                "phone": employee.phone,
                "address": employee.address,
            },
            departments=departments,
        )

    def add_email_taken_error(self):
        self.add_error("email", "An employee with this email already exists.")

    def build_employee(self, instance: Employee = None) -> Employee:
        """Copy cleaned data onto ``instance`` (or a new Employee)."""
        employee = instance if instance is not None else Employee()
        data = self.cleaned_data
        employee.full_name = data["full_name"]
        employee.department = data["department"]
        employee.email = data["email"]
        employee.phone = data.get("phone") or ""
        employee.address = data.get("address") or ""
        return employee
