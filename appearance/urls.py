from django.urls import path
from . import views

app_name = "appearance"

urlpatterns = [
    path("theme/", views.set_theme, name="set_theme"),
]
