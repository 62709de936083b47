from datetime import datetime, timezone

from lms_analytics.schemas.records import EnrollmentRecord, SubmissionRecord
from lms_analytics.schemas.snapshots import CourseSnapshot
from lms_analytics.services.instructor_dashboard_service import get_instructor_dashboard

NOW = datetime(2030, 6, 15, 12, 0, tzinfo=timezone.utc)


def enroll(student_id, course_id, status="active"):
    return EnrollmentRecord(student_id=student_id, course_id=course_id, status=status, enrolled_at="2030-01-01T00:00:00.000Z")


def submit(student_id, course_id, submitted_at, status="submitted"):
    graded = status in ("graded", "returned")
    return SubmissionRecord(
        student_id=student_id,
        course_id=course_id,
        assignment_id="asg-1",
        status=status,
        grade=80 if graded else None,
        adjusted_grade=80 if graded else None,
        submitted_at=submitted_at,
    )


def test_instructor_dashboard_totals():
    courses = [
        CourseSnapshot(
            course_id="c1",
            enrollments=[enroll("s1", "c1"), enroll("s2", "c1", status="dropped")],
            submissions=[
                submit("s1", "c1", "2030-06-14T09:00:00.000Z"),
                submit("s2", "c1", "2030-06-01T09:00:00.000Z", status="graded"),
            ],
        ),
        CourseSnapshot(
            course_id="c2",
            enrollments=[enroll("s3", "c2"), enroll("s4", "c2", status="completed"), enroll("s5", "c2")],
            submissions=[
                submit("s3", "c2", "2030-06-08T12:00:00.000Z"),
                submit("s4", "c2", "2030-06-08T11:59:59.999Z", status="returned"),
            ],
        ),
    ]

    dashboard = get_instructor_dashboard(courses, now=NOW)

    assert dashboard.total_courses == 2
    assert dashboard.total_students == 5
    assert dashboard.active_students == 3
    assert dashboard.pending_grading == 2
    # cutoff is 2030-06-08T12:00:00.000Z, inclusive
    assert dashboard.recent_submissions == 2
    assert dashboard.as_of == "2030-06-15T12:00:00.000Z"


def test_instructor_dashboard_without_courses():
    dashboard = get_instructor_dashboard([], now=NOW)
    assert dashboard.total_courses == 0
    assert dashboard.total_students == 0
    assert dashboard.recent_submissions == 0
