from django.urls import path
from . import views

app_name = "locations"

urlpatterns = [
    path("", views.submit, name="submit"),
    path("cancel/", views.cancel_edit, name="cancel_edit"),
    path("<str:location_id>/edit/", views.edit, name="edit"),
    path("<str:location_id>/delete/", views.delete, name="delete"),
]
