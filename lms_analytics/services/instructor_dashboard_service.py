"""Instructor dashboard summary across the instructor's courses."""

from datetime import datetime, timedelta

from lms_analytics.core.time import iso_timestamp, utc_now
from lms_analytics.schemas.analytics import InstructorDashboard
from lms_analytics.schemas.snapshots import CourseSnapshot

RECENT_ACTIVITY_DAYS = 7


def get_instructor_dashboard(courses: list[CourseSnapshot], *, now: datetime | None = None) -> InstructorDashboard:
    """Totals across courses plus submissions received in the last seven days.

    Recency compares ``submitted_at`` to the cutoff as ISO strings, the same
    way the stored timestamps are ordered.
    """
    as_of = now or utc_now()
    cutoff = iso_timestamp(as_of - timedelta(days=RECENT_ACTIVITY_DAYS))

    total_students = 0
    active_students = 0
    pending_grading = 0
    recent_submissions = 0
    for course in courses:
        total_students += len(course.enrollments)
        active_students += sum(1 for e in course.enrollments if e.status == "active")
        pending_grading += sum(1 for s in course.submissions if s.status == "submitted")
        recent_submissions += sum(
            1 for s in course.submissions if s.submitted_at is not None and s.submitted_at >= cutoff
        )

    return InstructorDashboard(
        as_of=iso_timestamp(as_of),
        total_courses=len(courses),
        total_students=total_students,
        active_students=active_students,
        pending_grading=pending_grading,
        recent_submissions=recent_submissions,
    )
