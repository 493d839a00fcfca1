import logging
from concurrent.futures import ThreadPoolExecutor
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST
from backend.client import BackendError
from backend.services import fetch_courses, get_attendance, get_students
from locations.manager import LocationManager
from locations.views import CARRY_KEY
from .stats import CHART_COLORS, compute_statistics

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load dashboard data. Please try refreshing the page."


def fetch_overview_data():
    """Fetch students, courses and attendance together; first failure wins."""
    with ThreadPoolExecutor(max_workers=3) as pool:
        students_f = pool.submit(get_students)
        courses_f = pool.submit(fetch_courses)
        attendance_f = pool.submit(get_attendance)
        students_res = students_f.result()
        courses = courses_f.result()
        attendance = attendance_f.result()
    students = (students_res or {}).get("documents") or []
    return students, courses or [], attendance or []


def _display_name(user):
    return getattr(user, "name", "") or "Admin"


@login_required
def overview(request):
    stats = None
    error = None
    try:
        students, courses, attendance = fetch_overview_data()
        stats = compute_statistics(students, courses, attendance)
    except BackendError:
        logger.exception("Error fetching statistics")
        error = LOAD_ERROR
    ctx = {
        "active_nav": "overview",
        "display_name": _display_name(request.user),
        "stats": stats,
        "error": error,
        "chart_colors": CHART_COLORS,
    }
    return render(request, "dashboard/overview.html", ctx)


@login_required
@require_POST
def export_report(request):
    messages.success(request, "PDF Export functionality is ready!")
    return redirect("dashboard:overview")


@login_required
def settings_page(request):
    carried = request.session.pop(CARRY_KEY, False)
    if carried:
        manager = LocationManager.from_session(request.session)
    else:
        manager = LocationManager()
        manager.load()
    manager.save(request.session)
    ctx = {
        "active_nav": "settings",
        "manager": manager,
        "locations_open": carried or manager.is_editing,
    }
    return render(request, "dashboard/settings.html", ctx)
