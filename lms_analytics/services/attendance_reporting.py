"""Attendance statistics per student and per course."""

import logging
from typing import Dict, List

from lms_analytics.core.concurrency import fan_out
from lms_analytics.core.metrics import percent_of, round2
from lms_analytics.schemas.attendance import AttendanceStats, AttendanceSummaryRow, CourseAttendanceSummary
from lms_analytics.schemas.records import AttendanceRecord, EnrollmentRecord

logger = logging.getLogger(__name__)


def _status_counts(records: List[AttendanceRecord]) -> Dict[str, int]:
    counts = {"present": 0, "absent": 0, "late": 0, "excused": 0}
    for record in records:
        counts[record.status] += 1
    return counts


def get_student_attendance_stats(student_id: str, course_id: str, records: List[AttendanceRecord]) -> AttendanceStats:
    """Attendance stats for one student in one course.

    ``attended`` counts only "present"; the percentage also credits late and
    excused sessions.
    """
    counts = _status_counts(records)
    total = len(records)
    credited = counts["present"] + counts["late"] + counts["excused"]
    return AttendanceStats(
        student_id=student_id,
        course_id=course_id,
        total_sessions=total,
        attended=counts["present"],
        absent=counts["absent"],
        late=counts["late"],
        excused=counts["excused"],
        attendance_percentage=round2(percent_of(credited, total)),
    )


def get_course_attendance_summary(
    course_id: str,
    *,
    enrollments: List[EnrollmentRecord],
    attendance: List[AttendanceRecord],
    max_workers: int | None = None,
) -> CourseAttendanceSummary:
    """One row per enrolled student, in first-enrolled order.

    Row percentages are present-only (attended / total sessions).
    """
    student_ids = list(dict.fromkeys(e.student_id for e in enrollments))

    records_by_student: Dict[str, List[AttendanceRecord]] = {sid: [] for sid in student_ids}
    for record in attendance:
        if record.student_id in records_by_student:
            records_by_student[record.student_id].append(record)

    def build_row(student_id: str) -> AttendanceSummaryRow:
        records = records_by_student[student_id]
        counts = _status_counts(records)
        return AttendanceSummaryRow(
            student_id=student_id,
            total_sessions=len(records),
            attended=counts["present"],
            absent=counts["absent"],
            late=counts["late"],
            excused=counts["excused"],
            attendance_percentage=round2(percent_of(counts["present"], len(records))),
        )

    rows = fan_out(build_row, student_ids, max_workers)
    logger.debug("Computed attendance summary", extra={"course_id": course_id, "record_count": len(attendance)})
    return CourseAttendanceSummary(course_id=course_id, summary=rows)
