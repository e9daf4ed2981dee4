"""
Employee Directory App Configuration

Dieses Modul enthält die Django App-Konfiguration für das Mitarbeiterverzeichnis.
Die App employees verwaltet Mitarbeiter-Datensätze (Liste, Details, Anlegen,
Bearbeiten, Löschen).

Author: Employee Directory Team
Version: 1.0.0
"""

from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    """
    Django AppConfig für das Employee Directory Modul.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.employees'
    label = 'employees'
    verbose_name = 'Employee Directory'
