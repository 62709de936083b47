"""Request bodies carrying already-fetched record snapshots."""

from typing import Optional

from pydantic import BaseModel, Field

from lms_analytics.schemas.records import (
    AssignmentMeta,
    AttendanceRecord,
    EnrollmentRecord,
    ModuleMeta,
    ModuleProgressRecord,
    SubmissionRecord,
)


class StudentProgressSnapshot(BaseModel):
    enrollment: EnrollmentRecord
    module_progress: list[ModuleProgressRecord] = []
    submissions: list[SubmissionRecord] = []
    attendance: list[AttendanceRecord] = []
    modules: list[ModuleMeta] = []
    assignments: list[AssignmentMeta] = []


class CourseStudentsSnapshot(BaseModel):
    enrollments: list[EnrollmentRecord] = []
    submissions: list[SubmissionRecord] = []
    attendance: list[AttendanceRecord] = []


class CourseAnalyticsSnapshot(BaseModel):
    course_id: str
    enrollments: list[EnrollmentRecord] = []
    module_progress: list[ModuleProgressRecord] = []
    submissions: list[SubmissionRecord] = []
    attendance: list[AttendanceRecord] = []
    modules: list[ModuleMeta] = []


class StudentAttendanceSnapshot(BaseModel):
    student_id: str
    course_id: str
    records: list[AttendanceRecord] = []


class CourseAttendanceSnapshot(BaseModel):
    course_id: str
    enrollments: list[EnrollmentRecord] = []
    attendance: list[AttendanceRecord] = []


class PerformanceTimelineSnapshot(BaseModel):
    student_id: str
    course_id: str
    assignments: list[AssignmentMeta] = []
    submissions: list[SubmissionRecord] = []
    attendance: list[AttendanceRecord] = []


class AssignmentStatsSnapshot(BaseModel):
    assignment: AssignmentMeta
    submissions: list[SubmissionRecord] = []
    total_enrolled: int = Field(default=0, ge=0)


class CourseSnapshot(BaseModel):
    course_id: str
    enrollments: list[EnrollmentRecord] = []
    submissions: list[SubmissionRecord] = []


class InstructorDashboardSnapshot(BaseModel):
    courses: list[CourseSnapshot] = []


class GradeAdjustmentRequest(BaseModel):
    raw_grade: float = Field(ge=0, allow_inf_nan=False)
    is_late: bool = False
    days_late: int = Field(default=0, ge=0)
    late_penalty_per_day: float = Field(default=0.0, ge=0, allow_inf_nan=False)


class GradeAdjustmentResult(BaseModel):
    adjusted_grade: float


class GradeSubmissionRequest(BaseModel):
    submission: SubmissionRecord
    assignment: AssignmentMeta
    grade: float = Field(allow_inf_nan=False)
    graded_at: Optional[str] = None


class ReturnSubmissionRequest(BaseModel):
    submission: SubmissionRecord
    returned_at: Optional[str] = None
