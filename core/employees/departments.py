"""
Department catalog for the employee directory.

Departments are configuration, not code: the catalog reads the
``EMPLOYEE_DEPARTMENTS`` setting, which can be overridden per environment.
"""

from typing import Iterable, List, Optional, Tuple

from django.conf import settings


class DepartmentCatalog:
    """Fixed, ordered list of department names offered by the forms."""

    def __init__(self, names: Optional[Iterable[str]] = None):
        if names is None:
            names = getattr(settings, "EMPLOYEE_DEPARTMENTS", [])
        self._names = [name for name in names if name]

    @classmethod
    def from_settings(cls) -> "DepartmentCatalog":
        return cls()

    def choices(self) -> List[Tuple[str, str]]:
        """Choice tuples for a select widget, value equals label."""
        return [(name, name) for name in self._names]
