"""Chronological assignment and attendance series for one student."""

from typing import Dict, List

from lms_analytics.core.metrics import percent_of, round2
from lms_analytics.schemas.performance import PerformanceTimeline
from lms_analytics.schemas.records import AssignmentMeta, AttendanceRecord, SubmissionRecord


def _assignment_entry(assignment: AssignmentMeta, submission: SubmissionRecord | None) -> dict:
    if submission is None:
        return {
            "assignment_id": assignment.id,
            "assignment_title": assignment.title,
            "due_date": assignment.due_date,
            "max_points": assignment.points,
            "grade": None,
            "adjusted_grade": None,
            "percentage": 0.0,
            "submitted_at": None,
            "is_late": False,
            "status": "not_submitted",
        }

    if submission.adjusted_grade is not None:
        percentage = round2(percent_of(submission.adjusted_grade, assignment.points))
    else:
        percentage = 0.0
    return {
        "assignment_id": assignment.id,
        "assignment_title": assignment.title,
        "due_date": assignment.due_date,
        "max_points": assignment.points,
        "grade": submission.grade,
        "adjusted_grade": submission.adjusted_grade,
        "percentage": percentage,
        "submitted_at": submission.submitted_at,
        "is_late": submission.is_late,
        "status": submission.status,
    }


def get_student_performance_timeline(
    student_id: str,
    course_id: str,
    *,
    assignments: List[AssignmentMeta],
    submissions: List[SubmissionRecord],
    attendance: List[AttendanceRecord],
) -> PerformanceTimeline:
    submission_by_assignment: Dict[str, SubmissionRecord] = {}
    for sub in submissions:
        submission_by_assignment.setdefault(sub.assignment_id, sub)

    ordered_assignments = sorted(assignments, key=lambda a: a.created_at)
    performance = [_assignment_entry(a, submission_by_assignment.get(a.id)) for a in ordered_assignments]

    attendance_trend = [
        {"date": record.marked_at, "status": record.status, "module_id": record.module_id}
        for record in sorted(attendance, key=lambda r: r.marked_at)
    ]

    return PerformanceTimeline(
        student_id=student_id,
        course_id=course_id,
        assignment_performance=performance,
        attendance_trend=attendance_trend,
    )
