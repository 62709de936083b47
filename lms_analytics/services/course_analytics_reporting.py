"""Course-level analytics: rates, grade distribution, engagement and enrollment trend."""

import logging
import math
from datetime import date, timedelta
from typing import Dict, List

from lms_analytics.core.metrics import (
    ATTENDED_STATUSES,
    GRADE_LETTERS,
    average,
    letter_grade,
    percent_of,
    round2,
    safe_divide,
)
from lms_analytics.core.time import iso_date_part, iso_timestamp, utc_now
from lms_analytics.schemas.analytics import CourseAnalytics
from lms_analytics.schemas.records import (
    AttendanceRecord,
    EnrollmentRecord,
    ModuleMeta,
    ModuleProgressRecord,
    SubmissionRecord,
)

logger = logging.getLogger(__name__)

ENROLLMENT_TREND_DAYS = 30


def _enrollment_trend(enrollments: List[EnrollmentRecord], today: date) -> List[dict]:
    # Trailing window: today-30 .. today-1, oldest first
    counts: Dict[str, int] = {}
    for enrollment in enrollments:
        day = iso_date_part(enrollment.enrolled_at)
        counts[day] = counts.get(day, 0) + 1

    start = today - timedelta(days=ENROLLMENT_TREND_DAYS)
    trend = []
    for offset in range(ENROLLMENT_TREND_DAYS):
        day = (start + timedelta(days=offset)).isoformat()
        trend.append({"date": day, "count": counts.get(day, 0)})
    return trend


def _module_engagement(modules: List[ModuleMeta], module_progress: List[ModuleProgressRecord]) -> List[tuple]:
    time_by_module: Dict[str, int] = {}
    for record in module_progress:
        time_by_module[record.module_id] = time_by_module.get(record.module_id, 0) + record.time_spent_minutes
    return [(module.id, time_by_module.get(module.id, 0)) for module in modules]


def _most_and_least_active(engagement: List[tuple]) -> tuple[str | None, str | None]:
    most_id, most_time = None, 0
    least_id, least_time = None, math.inf
    for module_id, total_time in engagement:
        if total_time > most_time:
            most_id, most_time = module_id, total_time
        # Modules nobody spent time on are never engaged, not least active
        if 0 < total_time < least_time:
            least_id, least_time = module_id, total_time
    return most_id, least_id


def get_course_analytics(
    course_id: str,
    *,
    enrollments: List[EnrollmentRecord],
    module_progress: List[ModuleProgressRecord],
    submissions: List[SubmissionRecord],
    attendance: List[AttendanceRecord],
    modules: List[ModuleMeta],
    today: date | None = None,
) -> CourseAnalytics:
    """Aggregate every student's records in a course into CourseAnalytics.

    ``today`` anchors the enrollment trend window; when omitted the clock is
    read on this call.
    """
    now = utc_now()
    as_of_date = today or now.date()

    total_enrolled = len(enrollments)
    active_students = sum(1 for e in enrollments if e.status == "active")
    average_completion_rate = average(e.progress_percent for e in enrollments)

    graded = [s.adjusted_grade for s in submissions if s.adjusted_grade is not None]
    average_assignment_score = average(graded)

    attended = sum(1 for r in attendance if r.status in ATTENDED_STATUSES)
    average_attendance_rate = round2(percent_of(attended, len(attendance)))

    grade_distribution = {letter: 0 for letter in GRADE_LETTERS}
    for adjusted in graded:
        # Raw adjusted grade is bucketed as-is (assumes 100-point assignments)
        grade_distribution[letter_grade(adjusted)] += 1

    total_minutes = sum(r.time_spent_minutes for r in module_progress)
    avg_time_per_student_hours = round2(safe_divide(total_minutes, total_enrolled) / 60)

    most_active, least_active = _most_and_least_active(_module_engagement(modules, module_progress))

    logger.debug(
        "Computed course analytics",
        extra={"course_id": course_id, "record_count": total_enrolled + len(submissions) + len(attendance)},
    )

    return CourseAnalytics(
        course_id=course_id,
        total_enrolled=total_enrolled,
        active_students=active_students,
        average_completion_rate=average_completion_rate,
        average_assignment_score=average_assignment_score,
        average_attendance_rate=average_attendance_rate,
        grade_distribution=grade_distribution,
        avg_time_per_student_hours=avg_time_per_student_hours,
        most_active_module_id=most_active,
        least_active_module_id=least_active,
        enrollment_trend=_enrollment_trend(enrollments, as_of_date),
        updated_at=iso_timestamp(now),
    )
