"""
Core App Configuration - Employee Directory

This module contains the Django app configuration for the core application.
The core app serves as the foundation for shared functionality across
the directory apps.

Features:
- Ships the shared base template and layout
- Houses the employee directory app (core.employees)
- Houses the home, health and diagnostics app (core.home)

Author: Employee Directory Team
Version: 1.0.0
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
