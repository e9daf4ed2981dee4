"""
Employee Directory URL Configuration

URL Structure:
- /: Home and privacy pages
- /Employees/...: Employee directory pages (list, details, create, edit, delete)
- /health: Liveness probe
- /Home/Error[/<status_code>]: Generic error pages
- /admin/: Django admin (Jazzmin)

Author: Employee Directory Team
Version: 1.0.0
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("core.home.urls")),
    path("", include("core.employees.urls")),
]

handler404 = "core.home.views.page_not_found"
handler500 = "core.home.views.server_error"
