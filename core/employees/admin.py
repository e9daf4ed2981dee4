"""
Employee Directory Admin

Django Admin-Konfiguration (Jazzmin) für das Mitarbeiterverzeichnis.

Features:
- Listendarstellung mit Filter nach Abteilung
- Suche nach Name, E-Mail und Telefon
- Readonly-Felder für Zeitstempel und Versionszähler

Author: Employee Directory Team
Version: 1.0.0
"""

from django.contrib import admin

from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["full_name", "department", "email", "phone", "updated_at"]
    list_filter = ["department", "created_at"]
    search_fields = ["full_name", "email", "phone"]
    ordering = ["full_name"]
    readonly_fields = ["row_version", "created_at", "updated_at"]

    fieldsets = (
        ("Personal data", {"fields": ("full_name", "email", "phone", "address")}),
        ("Workplace", {"fields": ("department",)}),
        (
            "Audit",
            {
                "fields": ("row_version", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    # Anzahl der Einträge pro Seite
    list_per_page = 25
