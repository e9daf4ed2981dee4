"""
Employee Directory URLs

Conventional MVC-style routes under /Employees. Identifiers use a signed
integer converter so that zero and negative ids reach the views and are
answered as not found; the id-less variants answer 404 the same way.

Routes:
- /Employees, /Employees/Index       - list
- /Employees/Details/<id>            - details
- /Employees/Create                  - create form (GET) and create (POST)
- /Employees/Edit/<id>               - edit form (GET) and update (POST)
- /Employees/Delete/<id>             - confirmation (GET) and delete (POST)

Author: Employee Directory Team
Version: 1.0.0
"""

from django.urls import path, register_converter

from .converters import SignedIntConverter
from .views import (
    EmployeeCreateView,
    EmployeeDeleteView,
    EmployeeDetailView,
    EmployeeEditView,
    EmployeeListView,
)

register_converter(SignedIntConverter, "sint")

app_name = "employees"

urlpatterns = [
    path("Employees", EmployeeListView.as_view(), name="index"),
    path("Employees/Index", EmployeeListView.as_view()),
    path("Employees/Details/<sint:pk>", EmployeeDetailView.as_view(), name="details"),
    path("Employees/Details", EmployeeDetailView.as_view()),
    path("Employees/Create", EmployeeCreateView.as_view(), name="create"),
    path("Employees/Edit/<sint:pk>", EmployeeEditView.as_view(), name="edit"),
    path("Employees/Edit", EmployeeEditView.as_view()),
    path("Employees/Delete/<sint:pk>", EmployeeDeleteView.as_view(), name="delete"),
    path("Employees/Delete", EmployeeDeleteView.as_view()),
]
