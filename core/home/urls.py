from django.urls import path

from . import views

app_name = "home"

urlpatterns = [
    path("", views.index, name="index"),
    path("Home/Index", views.index),
    path("Home/Privacy", views.privacy, name="privacy"),
    path("health", views.health, name="health"),
    path("Home/Error", views.error, name="error"),
    path("Home/Error/<int:status_code>", views.error_status, name="error-status"),
]
