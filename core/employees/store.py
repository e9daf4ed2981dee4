"""
Employee Store - Employee Directory

Data-access handle over the Django ORM for the ``Employee`` entity. The
directory service receives an instance of this class instead of touching
``Employee.objects`` directly, so that the store can be swapped in tests.

Operations:
- ordered(): all employees ordered by full name
- find(): single employee by primary key
- add() / update() / remove(): single-record writes, each atomic
- exists() / email_in_use(): existence checks

Author: Employee Directory Team
Version: 1.0.0
"""

import logging
from typing import List, Optional

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from .exceptions import ConcurrencyConflict
from .models import Employee

logger = logging.getLogger(__name__)

# Fields replaced by an update; id, row_version and created_at are not editable.
EDITABLE_FIELDS = ("full_name", "department", "email", "phone", "address")


class EmployeeStore:
    """
    Store für Employee-Datensätze.
    """

    def __init__(self, using: Optional[str] = None):
        self.using = using

    def _queryset(self):
        queryset = Employee.objects.all()
        if self.using:
            queryset = queryset.using(self.using)
        return queryset

    def ordered(self) -> List[Employee]:
        return list(self._queryset().order_by("full_name", "id"))

    def find(self, employee_id) -> Optional[Employee]:
        if employee_id is None:
            return None
        return self._queryset().filter(pk=employee_id).first()

    def exists(self, employee_id) -> bool:
        return self._queryset().filter(pk=employee_id).exists()

    def email_in_use(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether another employee already uses the email address.

        The comparison ignores case. Blank addresses are never reported as
        in use; they are rejected by form validation instead.
        """
        if not email or not email.strip():
            return False

        queryset = self._queryset().filter(email__iexact=email.strip())
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()

    def add(self, employee: Employee) -> Employee:
        with transaction.atomic(using=self.using):
            employee.save(using=self.using, force_insert=True)
        return employee

    def update(self, employee: Employee, expected_version: int) -> Employee:
        """
        Replace the editable fields of an existing employee.

        The write only applies when the stored row version still equals
        ``expected_version``.

        Raises:
            ConcurrencyConflict: no row matched id and version
        """
        values = {field: getattr(employee, field) for field in EDITABLE_FIELDS}
        with transaction.atomic(using=self.using):
            updated = (
                self._queryset()
                .filter(pk=employee.pk, row_version=expected_version)
                .update(
                    row_version=F("row_version") + 1,
                    updated_at=timezone.now(),
                    **values,
                )
            )
        if updated == 0:
            logger.warning(
                f"Version check failed for employee {employee.pk} "
                f"(expected row version {expected_version})"
            )
            raise ConcurrencyConflict(employee.pk, expected_version)

        employee.row_version = expected_version + 1
        return employee

    def remove(self, employee: Employee) -> None:
        with transaction.atomic(using=self.using):
            employee.delete(using=self.using)
