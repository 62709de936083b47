"""Per-student progress aggregation for a single course."""

import logging
from typing import Dict, List

from lms_analytics.core.concurrency import fan_out
from lms_analytics.core.metrics import (
    ATTENDED_STATUSES,
    COMPLETED_SUBMISSION_STATUSES,
    average,
    percent_of,
    round2,
)
from lms_analytics.schemas.progress import CourseStudentsProgress, StudentProgress, StudentProgressRow
from lms_analytics.schemas.records import (
    AssignmentMeta,
    AttendanceRecord,
    EnrollmentRecord,
    ModuleMeta,
    ModuleProgressRecord,
    SubmissionRecord,
)

logger = logging.getLogger(__name__)


def _completion_status(enrollment: EnrollmentRecord) -> str:
    # Order matters: a dropped enrollment at 100% reports "completed"
    progress = enrollment.progress_percent
    if progress == 0:
        return "not_started"
    if progress >= 100:
        return "completed"
    if enrollment.status == "dropped":
        return "dropped"
    return "in_progress"


def _submission_summary(submissions: List[SubmissionRecord]) -> tuple[int, float]:
    completed = sum(1 for s in submissions if s.status in COMPLETED_SUBMISSION_STATUSES)
    score = average(s.adjusted_grade for s in submissions if s.adjusted_grade is not None)
    return completed, score


def _attendance_summary(records: List[AttendanceRecord]) -> tuple[int, int, float]:
    total = len(records)
    attended = sum(1 for r in records if r.status in ATTENDED_STATUSES)
    return attended, total, round2(percent_of(attended, total))


def get_student_progress(
    enrollment: EnrollmentRecord,
    *,
    module_progress: List[ModuleProgressRecord],
    submissions: List[SubmissionRecord],
    attendance: List[AttendanceRecord],
    modules: List[ModuleMeta],
    assignments: List[AssignmentMeta],
) -> StudentProgress:
    """Combine one student's records in a course into a StudentProgress."""
    progress_by_module: Dict[str, ModuleProgressRecord] = {}
    for record in module_progress:
        progress_by_module.setdefault(record.module_id, record)

    module_entries = []
    for module in sorted(modules, key=lambda m: m.order):
        record = progress_by_module.get(module.id)
        module_entries.append(
            {
                "module_id": module.id,
                "module_title": module.title,
                "progress_percentage": round2(record.progress_percent) if record else 0.0,
                "completed_at": record.completed_at if record else None,
                "time_spent_minutes": record.time_spent_minutes if record else 0,
            }
        )

    modules_completed = sum(1 for r in module_progress if r.completed_at)
    total_time = sum(r.time_spent_minutes for r in module_progress)
    assignments_completed, average_score = _submission_summary(submissions)
    classes_attended, total_classes, attendance_percentage = _attendance_summary(attendance)

    logger.debug(
        "Computed student progress",
        extra={
            "course_id": enrollment.course_id,
            "student_id": enrollment.student_id,
            "record_count": len(module_progress) + len(submissions) + len(attendance),
        },
    )

    return StudentProgress(
        student_id=enrollment.student_id,
        course_id=enrollment.course_id,
        overall_progress_percentage=round2(enrollment.progress_percent),
        modules_completed=modules_completed,
        total_modules=len(modules),
        total_time_spent_minutes=total_time,
        average_assignment_score=average_score,
        assignments_completed=assignments_completed,
        total_assignments=len(assignments),
        attendance_percentage=attendance_percentage,
        classes_attended=classes_attended,
        total_classes=total_classes,
        is_active=enrollment.status == "active",
        completion_status=_completion_status(enrollment),
        enrolled_at=enrollment.enrolled_at,
        last_accessed_at=enrollment.last_accessed_at or enrollment.enrolled_at,
        actual_completion_date=enrollment.completed_at,
        module_progress=module_entries,
    )


def get_course_students_progress(
    enrollments: List[EnrollmentRecord],
    *,
    submissions: List[SubmissionRecord],
    attendance: List[AttendanceRecord],
    max_workers: int | None = None,
) -> CourseStudentsProgress:
    """Build the roster view: one progress row per enrollment, in enrollment order."""
    submissions_by_student: Dict[str, List[SubmissionRecord]] = {e.student_id: [] for e in enrollments}
    for sub in submissions:
        submissions_by_student.setdefault(sub.student_id, []).append(sub)

    attendance_by_student: Dict[str, List[AttendanceRecord]] = {e.student_id: [] for e in enrollments}
    for rec in attendance:
        attendance_by_student.setdefault(rec.student_id, []).append(rec)

    def build_row(enrollment: EnrollmentRecord) -> StudentProgressRow:
        completed, score = _submission_summary(submissions_by_student[enrollment.student_id])
        _, _, attendance_percentage = _attendance_summary(attendance_by_student[enrollment.student_id])
        return StudentProgressRow(
            student_id=enrollment.student_id,
            overall_progress=round2(enrollment.progress_percent),
            assignments_completed=completed,
            average_score=score,
            attendance_percentage=attendance_percentage,
            last_accessed=enrollment.last_accessed_at or enrollment.enrolled_at,
            status=enrollment.status,
        )

    rows = fan_out(build_row, enrollments, max_workers)
    return CourseStudentsProgress(students=rows, total=len(rows))
