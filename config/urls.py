from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("accounts/", include("allauth.urls")),
    # dashboard sections
    path("settings/appearance/", include("appearance.urls")),
    path("settings/locations/", include("locations.urls")),
    path("", include("dashboard.urls")),
]
