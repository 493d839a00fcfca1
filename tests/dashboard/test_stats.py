from datetime import date

from dashboard.stats import compute_statistics, course_distribution, status_distribution, todays_attendance

TODAY = date(2025, 9, 18)

COURSES = [
    {"$id": "c1", "Programme": "Computer Science"},
    {"$id": "c2", "Programme": "Mathematics"},
    {"$id": "c3", "Programme": "Physics"},
]

STUDENTS = [
    {"$id": "s1", "Status": "Active", "Course": {"$id": "c1"}},
    {"$id": "s2", "Status": "Active", "Course": {"$id": "c1"}},
    {"$id": "s3", "Status": "Suspended", "Course": {"$id": "c3"}},
    {"$id": "s4", "Status": "Graduated", "Course": None},
]


def test_today_counts_exclude_other_days():
    attendance = [
        {"Status": "Present", "Marked_at": "2025-09-18T08:15:00.000+00:00"},
        {"Status": "Absent", "Marked_at": "2025-09-18T09:40:00.000+00:00"},
        {"Status": "Present", "Marked_at": "2025-09-17T08:15:00.000+00:00"},
    ]
    assert todays_attendance(attendance, TODAY) == {"present": 1, "absent": 1, "total": 2}


def test_unparseable_timestamps_are_skipped():
    attendance = [
        {"Status": "Present", "Marked_at": "not a date"},
        {"Status": "Present"},
        {"Status": "Late", "Marked_at": "2025-09-18T10:00:00"},
    ]
    assert todays_attendance(attendance, TODAY) == {"present": 0, "absent": 0, "total": 1}


def test_course_distribution_skips_empty_courses():
    assert course_distribution(STUDENTS, COURSES) == [
        {"name": "Computer Science", "value": 2},
        {"name": "Physics", "value": 1},
    ]


def test_status_distribution_keeps_first_seen_order():
    assert status_distribution(STUDENTS) == [
        {"name": "Active", "value": 2},
        {"name": "Suspended", "value": 1},
        {"name": "Graduated", "value": 1},
    ]


def test_compute_statistics():
    attendance = [
        {"Status": "Present", "Marked_at": "2025-09-18T08:00:00+00:00"},
        {"Status": "Present", "Marked_at": "2025-09-18T08:05:00+00:00"},
        {"Status": "Absent", "Marked_at": "2025-09-18T08:10:00+00:00"},
    ]
    stats = compute_statistics(STUDENTS, COURSES, attendance, today=TODAY)
    assert stats["total_students"] == 4
    assert stats["total_courses"] == 3
    assert stats["todays_attendance"] == {"present": 2, "absent": 1, "total": 3}
    assert stats["present_percentage"] == 67
    assert stats["absent_percentage"] == 33


def test_percentages_are_zero_without_records_today():
    stats = compute_statistics([], [], [], today=TODAY)
    assert stats["present_percentage"] == 0
    assert stats["absent_percentage"] == 0
    assert stats["course_distribution"] == []
    assert stats["status_distribution"] == []
