"""
Employee Directory Service

Request-independent logic behind the employee pages. Every operation
returns an ``Outcome`` tagged with an ``OutcomeKind``; the views translate
outcomes into rendered pages, redirects, flash messages and 404s.

Validation order for writes:
1. Form validation (required fields, email shape, department)
2. Email uniqueness (case-insensitive)
3. Persistence (single-record, atomic)

Collaborators (store, department catalog, logger) are passed to the
constructor; ``EmployeeDirectoryService.default()`` wires the production
ones.

Author: Employee Directory Team
Version: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional

from django.db import DatabaseError

from .departments import DepartmentCatalog
from .exceptions import ConcurrencyConflict
from .forms import EmployeeForm
from .models import Employee
from .store import EmployeeStore

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Unable to save changes. Please try again."


class OutcomeKind(Enum):
    SUCCESS = "success"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass
class Outcome:
    """Repräsentiert das Ergebnis einer Verzeichnis-Operation."""

    kind: OutcomeKind
    employee: Optional[Employee] = None
    employees: List[Employee] = field(default_factory=list)
    form: Optional[EmployeeForm] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def not_found(self) -> bool:
        return self.kind is OutcomeKind.NOT_FOUND


def parse_employee_id(value: Any) -> Optional[int]:
    """Return ``value`` as int, or None when it is missing or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def is_valid_employee_id(value: Any) -> bool:
    employee_id = parse_employee_id(value)
    return employee_id is not None and employee_id > 0


class EmployeeDirectoryService:
    """
    Service für das Mitarbeiterverzeichnis.

    Mediates between the HTTP layer and the employee store. Failures of the
    store are converted into outcomes at this boundary; only an unresolved
    concurrency conflict on update is raised.
    """

    def __init__(
        self,
        store: EmployeeStore,
        departments: DepartmentCatalog,
        logger: logging.Logger = logger,
    ):
        if store is None:
            raise ValueError("store is required")
        if departments is None:
            raise ValueError("departments is required")
        self.store = store
        self.departments = departments
        self.logger = logger

    @classmethod
    def default(cls) -> "EmployeeDirectoryService":
        return cls(EmployeeStore(), DepartmentCatalog.from_settings())

    def build_form(self, data: Optional[Mapping] = None) -> EmployeeForm:
        return EmployeeForm(data, departments=self.departments)

    # --- Read operations ---

    def list_employees(self) -> Outcome:
        try:
            employees = self.store.ordered()
        except Exception as e:
            self.logger.exception(f"Error occurred while retrieving employees list: {e}")
            return Outcome(
                OutcomeKind.STORE_FAILURE,
                message="An error occurred while retrieving employees.",
            )
        return Outcome(OutcomeKind.SUCCESS, employees=employees)

    def _lookup(self, employee_id, purpose: str, failure_message: str) -> Outcome:
        if not is_valid_employee_id(employee_id):
            self.logger.warning(f"{purpose} requested with invalid ID: {employee_id}")
            return Outcome(OutcomeKind.NOT_FOUND)

        employee_id = parse_employee_id(employee_id)
        try:
            employee = self.store.find(employee_id)
        except Exception as e:
            self.logger.exception(
                f"Error occurred while loading {purpose} for employee ID {employee_id}: {e}"
            )
            return Outcome(OutcomeKind.STORE_FAILURE, message=failure_message)

        if employee is None:
            self.logger.warning(f"Employee with ID {employee_id} not found ({purpose})")
            return Outcome(OutcomeKind.NOT_FOUND)
        return Outcome(OutcomeKind.SUCCESS, employee=employee)

    def get_by_id(self, employee_id) -> Outcome:
        return self._lookup(
            employee_id,
            "details",
            "An error occurred while retrieving employee details.",
        )

    def get_for_delete(self, employee_id) -> Outcome:
        return self._lookup(
            employee_id,
            "delete confirmation",
            "An error occurred while loading the delete confirmation.",
        )

    def get_for_edit(self, employee_id) -> Outcome:
        outcome = self._lookup(
            employee_id,
            "edit form",
            "An error occurred while loading the edit form.",
        )
        if outcome.ok:
            outcome.form = EmployeeForm.for_employee(
                outcome.employee, departments=self.departments
            )
        return outcome

    def prepare_create_form(self) -> Outcome:
        try:
            form = self.build_form()
        except Exception as e:
            self.logger.exception(f"Error occurred while preparing the create form: {e}")
            return Outcome(
                OutcomeKind.UNEXPECTED_ERROR,
                message="An error occurred while loading the create form.",
            )
        return Outcome(OutcomeKind.SUCCESS, form=form)

    # --- Write operations ---

    def create(self, data: Mapping) -> Outcome:
        """
        Validate and persist a new employee.

        Args:
            data: Submitted form data (e.g. ``request.POST``)

        Returns:
            Outcome; on anything but SUCCESS the bound form carries the
            submitted values and field errors and nothing was persisted.
        """
        form = self.build_form(data)
        try:
            if not form.is_valid():
                return Outcome(OutcomeKind.INVALID, form=form)

            if self.store.email_in_use(form.cleaned_data["email"]):
                form.add_email_taken_error()
                return Outcome(OutcomeKind.INVALID, form=form)

            employee = self.store.add(form.build_employee())
        except DatabaseError as e:
            self.logger.exception(f"Database error occurred while creating employee: {e}")
            form.add_error(None, SAVE_FAILED_MESSAGE)
            return Outcome(OutcomeKind.STORE_FAILURE, form=form)
        except Exception as e:
            self.logger.exception(f"Unexpected error occurred while creating employee: {e}")
            return Outcome(
                OutcomeKind.UNEXPECTED_ERROR,
                form=form,
                message="An unexpected error occurred while creating the employee.",
            )

        self.logger.info(
            f"Employee created successfully: {employee.full_name} (ID: {employee.pk})"
        )
        return Outcome(
            OutcomeKind.SUCCESS,
            employee=employee,
            message="Employee created successfully.",
        )

    def update(self, employee_id, data: Mapping) -> Outcome:
        """
        Validate and persist changes to an existing employee.

        The identifier posted with the form must match ``employee_id``;
        otherwise the request is answered as not found without touching the
        store.

        Raises:
            ConcurrencyConflict: the version check failed and the employee
                still exists
        """
        path_id = parse_employee_id(employee_id)
        posted_id = parse_employee_id(data.get("id"))
        if path_id is None or posted_id != path_id:
            self.logger.warning(
                f"Edit rejected: path ID {employee_id} does not match posted ID {data.get('id')}"
            )
            return Outcome(OutcomeKind.NOT_FOUND)

        form = self.build_form(data)
        try:
            if not form.is_valid():
                return Outcome(OutcomeKind.INVALID, form=form)

            if self.store.email_in_use(form.cleaned_data["email"], exclude_id=path_id):
                form.add_email_taken_error()
                return Outcome(OutcomeKind.INVALID, form=form)

            expected_version = form.cleaned_data.get("row_version")
            if expected_version is None:
                current = self.store.find(path_id)
                expected_version = current.row_version if current is not None else 0

            employee = form.build_employee(Employee(pk=path_id))
            self.store.update(employee, expected_version)
        except ConcurrencyConflict:
            if not self.store.exists(path_id):
                self.logger.warning(f"Employee with ID {path_id} was deleted during edit")
                return Outcome(OutcomeKind.NOT_FOUND)
            raise
        except DatabaseError as e:
            self.logger.exception(
                f"Database error occurred while updating employee ID {path_id}: {e}"
            )
            form.add_error(None, SAVE_FAILED_MESSAGE)
            return Outcome(OutcomeKind.STORE_FAILURE, form=form)
        except Exception as e:
            self.logger.exception(
                f"Unexpected error occurred while updating employee ID {path_id}: {e}"
            )
            return Outcome(
                OutcomeKind.UNEXPECTED_ERROR,
                form=form,
                message="An unexpected error occurred while updating the employee.",
            )

        self.logger.info(
            f"Employee updated successfully: {employee.full_name} (ID: {employee.pk})"
        )
        return Outcome(
            OutcomeKind.SUCCESS,
            employee=employee,
            message="Employee updated successfully.",
        )

    def confirm_delete(self, employee_id) -> Outcome:
        """
        Delete an employee after confirmation.

        Deleting an id that is already gone yields NOT_FOUND. On failure the
        record is presumed to still exist.
        """
        if not is_valid_employee_id(employee_id):
            self.logger.warning(f"Delete requested with invalid ID: {employee_id}")
            return Outcome(OutcomeKind.NOT_FOUND)

        employee_id = parse_employee_id(employee_id)
        try:
            employee = self.store.find(employee_id)
            if employee is None:
                self.logger.warning(
                    f"Attempted to delete non-existent employee with ID: {employee_id}"
                )
                return Outcome(OutcomeKind.NOT_FOUND)

            self.store.remove(employee)
        except DatabaseError as e:
            self.logger.exception(
                f"Database error occurred while deleting employee ID {employee_id}: {e}"
            )
            return Outcome(
                OutcomeKind.STORE_FAILURE,
                message="Unable to delete the employee. Please try again.",
            )
        except Exception as e:
            self.logger.exception(
                f"Unexpected error occurred while deleting employee ID {employee_id}: {e}"
            )
            return Outcome(
                OutcomeKind.UNEXPECTED_ERROR,
                message="An unexpected error occurred while deleting the employee.",
            )

        self.logger.info(
            f"Employee deleted successfully: {employee.full_name} (ID: {employee_id})"
        )
        return Outcome(
            OutcomeKind.SUCCESS,
            employee=employee,
            message="Employee deleted successfully.",
        )
