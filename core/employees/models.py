from django.db import models


class Employee(models.Model):
    """
    Model für Mitarbeiterdaten im Verzeichnis
    """

    full_name = models.CharField(max_length=100, verbose_name="Full name")
    department = models.CharField(
        max_length=100,
        verbose_name="Department",
        help_text="One of the configured EMPLOYEE_DEPARTMENTS",
    )
    email = models.EmailField(
        unique=True,
        verbose_name="Email address",
        help_text="Business email address, unique across the directory",
    )
    phone = models.CharField(max_length=20, blank=True, verbose_name="Phone")
    address = models.CharField(max_length=250, blank=True, verbose_name="Address")
    row_version = models.PositiveIntegerField(
        default=1,
        editable=False,
        help_text="Optimistic concurrency token, bumped on every update",
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Updated at")

    class Meta:
        verbose_name = "Employee"
        verbose_name_plural = "Employees"
        ordering = ["full_name"]
        indexes = [
            models.Index(fields=["full_name"], name="employee_full_name_idx"),
            models.Index(fields=["department"], name="employee_department_idx"),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.department})"
