"""
Home & Diagnostics App Configuration

Dieses Modul enthält die Django App-Konfiguration für Startseite,
Datenschutzseite, Health-Check und Fehlerseiten.

Author: Employee Directory Team
Version: 1.0.0
"""

from django.apps import AppConfig


class HomeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.home'
    label = 'home'
    verbose_name = 'Health & Diagnostics'
