import logging
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST
from backend.client import BackendError
from .forms import LocationForm
from .manager import LocationManager

logger = logging.getLogger(__name__)

# Set after a mutation so the settings page renders the updated local
# list instead of fetching again.
CARRY_KEY = "location_manager_carry"


def _back_to_settings(request, manager):
    manager.save(request.session)
    request.session[CARRY_KEY] = True
    return redirect(reverse("dashboard:settings") + "#locations")


@login_required
@require_POST
def submit(request):
    manager = LocationManager.from_session(request.session)
    form = LocationForm(request.POST)
    if not form.is_valid():
        manager.form_data = {
            "Latitude": request.POST.get("Latitude", ""),
            "Longitude": request.POST.get("Longitude", ""),
        }
        messages.error(request, "Latitude and longitude must both be numbers.")
        return _back_to_settings(request, manager)
    logger.debug("%s location %s", "Updating" if manager.is_editing else "Adding", manager.editing_id or "")
    try:
        messages.success(request, manager.submit(form.payload()))
    except BackendError as e:
        messages.error(request, str(e))
    return _back_to_settings(request, manager)


@login_required
def edit(request, location_id):
    manager = LocationManager.from_session(request.session)
    try:
        manager.start_edit(location_id)
    except KeyError:
        messages.error(request, "Location not found.")
    return _back_to_settings(request, manager)


@login_required
@require_POST
def cancel_edit(request):
    manager = LocationManager.from_session(request.session)
    manager.cancel_edit()
    return _back_to_settings(request, manager)


@login_required
def delete(request, location_id):
    manager = LocationManager.from_session(request.session)
    if request.method != "POST":
        try:
            location = manager.get(location_id)
        except KeyError:
            location = None
        return render(
            request,
            "locations/confirm_delete.html",
            {"location": location, "location_id": location_id, "active_nav": "settings"},
        )
    confirmed = request.POST.get("confirm") == "yes"
    try:
        if manager.delete(location_id, confirmed):
            messages.success(request, "Location deleted.")
    except BackendError as e:
        messages.error(request, str(e))
    return _back_to_settings(request, manager)
