"""Course-level and instructor-level analytics schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_serializer


class GradeDistribution(BaseModel):
    A: int = 0
    B: int = 0
    C: int = 0
    D: int = 0
    F: int = 0

    model_config = ConfigDict(from_attributes=True)


class EnrollmentTrendPoint(BaseModel):
    date: str
    count: int

    model_config = ConfigDict(from_attributes=True)


class CourseAnalytics(BaseModel):
    course_id: str
    total_enrolled: int
    active_students: int
    average_completion_rate: float
    average_assignment_score: float
    average_attendance_rate: float
    grade_distribution: GradeDistribution
    avg_time_per_student_hours: float
    most_active_module_id: Optional[str] = None
    least_active_module_id: Optional[str] = None
    enrollment_trend: list[EnrollmentTrendPoint]
    updated_at: str

    @model_serializer(mode="wrap")
    def serialize(self, handler):
        data = handler(self)
        # Modules without engagement are left out rather than reported as null
        for field in ("most_active_module_id", "least_active_module_id"):
            if data.get(field) is None:
                data.pop(field, None)
        return data

    model_config = ConfigDict(from_attributes=True)


class AssignmentStats(BaseModel):
    assignment_id: str
    total_enrolled: int
    total_submissions: int
    graded_submissions: int
    pending_grading: int
    late_submissions: int
    submission_rate: float
    average_grade: float
    highest_grade: float
    lowest_grade: float

    model_config = ConfigDict(from_attributes=True)


class InstructorDashboard(BaseModel):
    as_of: str
    total_courses: int
    total_students: int
    active_students: int
    pending_grading: int
    recent_submissions: int

    model_config = ConfigDict(from_attributes=True)
