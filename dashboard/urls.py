from django.urls import path
from . import views

app_name = "dashboard"

urlpatterns = [
    path("", views.overview, name="overview"),
    path("export/", views.export_report, name="export"),
    path("settings/", views.settings_page, name="settings"),
]
