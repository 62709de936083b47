import pytest
from pydantic import ValidationError

from lms_analytics.schemas.records import AssignmentMeta, SubmissionRecord
from lms_analytics.services.grading import adjust_grade, grade_submission, return_submission


def make_assignment(penalty: float = 10.0) -> AssignmentMeta:
    return AssignmentMeta(
        id="asg-1",
        course_id="course-1",
        title="Essay",
        points=100,
        due_date="2030-03-01T23:59:00.000Z",
        late_penalty_per_day=penalty,
        created_at="2030-02-01T09:00:00.000Z",
    )


def make_submission(is_late: bool = False, days_late: int | None = None) -> SubmissionRecord:
    return SubmissionRecord(
        student_id="stu-1",
        course_id="course-1",
        assignment_id="asg-1",
        status="late" if is_late else "submitted",
        is_late=is_late,
        days_late=days_late,
        submitted_at="2030-03-03T10:00:00.000Z",
    )


def test_on_time_grade_is_unchanged():
    assert adjust_grade(100, False, 3, 10) == 100


def test_late_penalty_is_linear_per_day():
    assert adjust_grade(100, True, 2, 10) == 80
    assert adjust_grade(50, True, 1, 20) == 40


def test_late_penalty_clamps_at_zero():
    assert adjust_grade(10, True, 50, 10) == 0


def test_late_with_zero_penalty_or_days_keeps_grade():
    assert adjust_grade(88, True, 5, 0) == 88
    assert adjust_grade(88, True, 0, 10) == 88


def test_adjust_grade_rejects_negative_inputs():
    with pytest.raises(ValueError):
        adjust_grade(-1, False, 0, 0)
    with pytest.raises(ValueError):
        adjust_grade(10, True, -1, 10)
    with pytest.raises(ValueError):
        adjust_grade(10, True, 1, -5)


def test_grade_submission_applies_penalty_once():
    submission = make_submission(is_late=True, days_late=2)
    graded = grade_submission(submission, make_assignment(10), 90, graded_at="2030-03-05T12:00:00.000Z")

    assert graded.status == "graded"
    assert graded.grade == 90
    assert graded.adjusted_grade == pytest.approx(72.0)
    assert graded.graded_at == "2030-03-05T12:00:00.000Z"
    # Original record untouched
    assert submission.status == "late"
    assert submission.adjusted_grade is None


def test_grade_submission_on_time():
    graded = grade_submission(make_submission(), make_assignment(10), 77)
    assert graded.adjusted_grade == 77
    assert graded.graded_at is not None
    assert graded.graded_at.endswith("Z")


def test_grade_submission_late_without_days_keeps_grade():
    graded = grade_submission(make_submission(is_late=True, days_late=None), make_assignment(10), 60)
    assert graded.adjusted_grade == 60


def test_grade_submission_rejects_negative_grade():
    with pytest.raises(ValueError, match="Valid grade is required"):
        grade_submission(make_submission(), make_assignment(), -5)


@pytest.mark.parametrize("grade", [float("nan"), float("inf")])
def test_grade_submission_rejects_non_finite_grade(grade):
    with pytest.raises(ValueError, match="Valid grade is required"):
        grade_submission(make_submission(is_late=True, days_late=2), make_assignment(10), grade)


def test_adjust_grade_rejects_non_finite_inputs():
    with pytest.raises(ValueError):
        adjust_grade(float("nan"), True, 2, 10)
    with pytest.raises(ValueError):
        adjust_grade(float("nan"), False, 0, 0)
    with pytest.raises(ValueError):
        adjust_grade(80, True, 2, float("inf"))


def test_submission_record_rejects_nan_grade():
    with pytest.raises(ValidationError):
        SubmissionRecord(student_id="stu-1", course_id="course-1", assignment_id="asg-1", grade=float("nan"))


def test_return_submission_marks_graded_copy_returned():
    graded = grade_submission(make_submission(), make_assignment(), 85, graded_at="2030-03-05T12:00:00.000Z")
    returned = return_submission(graded, returned_at="2030-03-06T08:00:00.000Z")

    assert returned.status == "returned"
    assert returned.returned_at == "2030-03-06T08:00:00.000Z"
    assert returned.grade == 85
    assert returned.adjusted_grade == 85
    assert returned.graded_at == "2030-03-05T12:00:00.000Z"
    assert graded.status == "graded"


def test_return_submission_stamps_current_time():
    graded = grade_submission(make_submission(), make_assignment(), 70)
    assert return_submission(graded).returned_at.endswith("Z")


@pytest.mark.parametrize("status", ["submitted", "late"])
def test_return_submission_requires_graded_status(status):
    submission = make_submission(is_late=status == "late", days_late=1 if status == "late" else None)
    with pytest.raises(ValueError, match="Submission must be graded before returning"):
        return_submission(submission)


def test_returned_submission_cannot_be_returned_again():
    graded = grade_submission(make_submission(), make_assignment(), 70)
    with pytest.raises(ValueError):
        return_submission(return_submission(graded))
