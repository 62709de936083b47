"""Late-penalty grade adjustment and the grade/return actions on a submission."""

import logging
import math

from lms_analytics.core.time import iso_timestamp, utc_now
from lms_analytics.schemas.records import AssignmentMeta, SubmissionRecord

logger = logging.getLogger(__name__)


def adjust_grade(raw_grade: float, is_late: bool, days_late: int, late_penalty_per_day: float) -> float:
    """Apply a linear per-day late penalty (percent of the raw grade), floored at zero."""
    if not math.isfinite(raw_grade) or raw_grade < 0:
        raise ValueError("raw_grade must be a finite number >= 0")
    if days_late < 0:
        raise ValueError("days_late must be >= 0")
    if not math.isfinite(late_penalty_per_day) or late_penalty_per_day < 0:
        raise ValueError("late_penalty_per_day must be a finite number >= 0")

    if not is_late:
        return raw_grade
    penalty = (late_penalty_per_day / 100) * raw_grade * days_late
    return max(0.0, raw_grade - penalty)


def grade_submission(
    submission: SubmissionRecord,
    assignment: AssignmentMeta,
    grade: float,
    *,
    graded_at: str | None = None,
) -> SubmissionRecord:
    """Return the graded copy of ``submission`` with its adjusted grade fixed at grading time."""
    if grade is None or not math.isfinite(grade) or grade < 0:
        raise ValueError("Valid grade is required")

    adjusted = adjust_grade(
        grade,
        submission.is_late,
        submission.days_late or 0,
        assignment.late_penalty_per_day,
    )
    logger.debug(
        "Graded submission: raw=%s adjusted=%s days_late=%s",
        grade,
        adjusted,
        submission.days_late or 0,
        extra={
            "course_id": submission.course_id,
            "student_id": submission.student_id,
            "assignment_id": submission.assignment_id,
        },
    )
    return submission.model_copy(
        update={
            "status": "graded",
            "grade": grade,
            "adjusted_grade": adjusted,
            "graded_at": graded_at or iso_timestamp(utc_now()),
        }
    )


def return_submission(submission: SubmissionRecord, *, returned_at: str | None = None) -> SubmissionRecord:
    """Hand a graded submission back to the student; grades are left as they were."""
    if submission.status != "graded":
        raise ValueError("Submission must be graded before returning")

    logger.debug(
        "Returned submission",
        extra={
            "course_id": submission.course_id,
            "student_id": submission.student_id,
            "assignment_id": submission.assignment_id,
        },
    )
    return submission.model_copy(
        update={
            "status": "returned",
            "returned_at": returned_at or iso_timestamp(utc_now()),
        }
    )
