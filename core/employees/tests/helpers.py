from core.employees.models import Employee


def employee_data(**overrides):
    """Form payload for a valid employee, as posted by the create/edit pages."""
    data = {
        "full_name": "Ann Lee",
        "department": "Finance",
        "email": "ann@x.com",
        "phone": "",
        "address": "",
    }
    data.update(overrides)
    return data


def make_employee(**overrides) -> Employee:
    values = {
        "full_name": "Ann Lee",
        "department": "Finance",
        "email": "ann@x.com",
    }
    values.update(overrides)
    return Employee.objects.create(**values)


def edit_data(employee: Employee, **overrides):
    data = employee_data(
        id=str(employee.pk),
        row_version=str(employee.row_version),
        full_name=employee.full_name,
        department=employee.department,
        email=employee.email,
        phone=employee.phone,
        address=employee.address,
    )
    data.update(overrides)
    return data
