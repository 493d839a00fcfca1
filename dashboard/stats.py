from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from django.utils import timezone
from django.utils.dateparse import parse_datetime

CHART_COLORS = ["#2563eb", "#16a34a", "#d97706", "#dc2626", "#7c3aed", "#0284c7"]


def _record_day(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        dt = parse_datetime(str(value))
    except ValueError:
        return None
    if dt is None:
        return None
    if timezone.is_aware(dt):
        dt = timezone.localtime(dt)
    return dt.date()


def _percentage(part: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(part / total * 100 + 0.5)


def todays_attendance(attendance: List[Dict[str, Any]], today: Optional[date] = None) -> Dict[str, int]:
    today = today or timezone.localdate()
    records = [r for r in attendance if _record_day(r.get("Marked_at")) == today]
    return {
        "present": sum(1 for r in records if r.get("Status") == "Present"),
        "absent": sum(1 for r in records if r.get("Status") == "Absent"),
        "total": len(records),
    }


def course_distribution(students, courses) -> List[Dict[str, Any]]:
    counts: Dict[str, int] = {}
    for s in students:
        course = s.get("Course") or {}
        cid = course.get("$id") if isinstance(course, dict) else None
        if cid:
            counts[cid] = counts.get(cid, 0) + 1
    out = []
    for c in courses:
        value = counts.get(c.get("$id"), 0)
        if value > 0:
            out.append({"name": c.get("Programme"), "value": value})
    return out


def status_distribution(students) -> List[Dict[str, Any]]:
    # dicts keep first-seen order
    counts: Dict[Any, int] = {}
    for s in students:
        status = s.get("Status")
        counts[status] = counts.get(status, 0) + 1
    return [{"name": name, "value": value} for name, value in counts.items()]


def compute_statistics(students, courses, attendance, today: Optional[date] = None) -> Dict[str, Any]:
    students = students or []
    courses = courses or []
    attendance = attendance or []
    today_counts = todays_attendance(attendance, today)
    return {
        "total_students": len(students),
        "total_courses": len(courses),
        "todays_attendance": today_counts,
        "present_percentage": _percentage(today_counts["present"], today_counts["total"]),
        "absent_percentage": _percentage(today_counts["absent"], today_counts["total"]),
        "course_distribution": course_distribution(students, courses),
        "status_distribution": status_distribution(students),
    }
