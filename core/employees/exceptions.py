"""
Employee Directory Exceptions

Exception classes raised by the employee store and directory service.
Expected outcomes (validation errors, missing records, store failures) are
reported through ``Outcome`` objects; only conditions the service cannot
resolve are raised to the caller.

Author: Employee Directory Team
Version: 1.0.0
"""

from typing import Optional


class EmployeeDirectoryError(Exception):
    """
    Base exception class for all employee directory errors.

    Attributes:
        message (str): Human-readable error message
        employee_id (Optional[int]): Identifier of the affected employee
    """

    def __init__(self, message: str, employee_id: Optional[int] = None) -> None:
        self.message = message
        self.employee_id = employee_id
        super().__init__(self.message)


class ConcurrencyConflict(EmployeeDirectoryError):
    """
    Raised when a version-checked update matched no row.

    The record was either deleted or modified by another actor since it
    was read. The service resolves the first case into a not-found outcome
    and re-raises the second.
    """

    def __init__(self, employee_id: int, expected_version: Optional[int] = None) -> None:
        self.expected_version = expected_version
        super().__init__(
            f"Employee {employee_id} was modified or deleted concurrently "
            f"(expected row version {expected_version})",
            employee_id=employee_id,
        )
