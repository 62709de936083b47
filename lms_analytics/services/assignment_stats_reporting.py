"""Submission statistics for a single assignment."""

from typing import List

from lms_analytics.core.metrics import COMPLETED_SUBMISSION_STATUSES, average, percent_of, round2
from lms_analytics.schemas.analytics import AssignmentStats
from lms_analytics.schemas.records import AssignmentMeta, SubmissionRecord


def get_assignment_stats(
    assignment: AssignmentMeta,
    submissions: List[SubmissionRecord],
    *,
    total_enrolled: int,
) -> AssignmentStats:
    total_submissions = len(submissions)
    graded_submissions = sum(1 for s in submissions if s.status in COMPLETED_SUBMISSION_STATUSES)
    grades = [s.adjusted_grade for s in submissions if s.adjusted_grade is not None]

    return AssignmentStats(
        assignment_id=assignment.id,
        total_enrolled=total_enrolled,
        total_submissions=total_submissions,
        graded_submissions=graded_submissions,
        pending_grading=total_submissions - graded_submissions,
        late_submissions=sum(1 for s in submissions if s.is_late),
        submission_rate=round2(percent_of(total_submissions, total_enrolled)),
        average_grade=average(grades),
        highest_grade=max(grades) if grades else 0.0,
        lowest_grade=min(grades) if grades else 0.0,
    )
