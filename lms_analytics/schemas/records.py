"""Input record schemas consumed by the performance engine.

Timestamps are kept as the ISO-8601 strings the platform stores; the engine
passes them through untouched.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

EnrollmentStatus = Literal["active", "dropped", "completed"]
SubmissionStatus = Literal["not_submitted", "submitted", "late", "graded", "returned"]
AttendanceStatus = Literal["present", "absent", "late", "excused"]


class EnrollmentRecord(BaseModel):
    student_id: str
    course_id: str
    status: EnrollmentStatus = "active"
    progress_percent: float = Field(default=0.0, ge=0, le=100)
    enrolled_at: str
    last_accessed_at: Optional[str] = None
    completed_at: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ModuleProgressRecord(BaseModel):
    student_id: str
    module_id: str
    course_id: str
    progress_percent: float = Field(default=0.0, ge=0, le=100)
    completed_at: Optional[str] = None
    time_spent_minutes: int = Field(default=0, ge=0)

    model_config = ConfigDict(from_attributes=True)


class SubmissionRecord(BaseModel):
    student_id: str
    course_id: str
    assignment_id: str
    status: SubmissionStatus = "submitted"
    grade: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    adjusted_grade: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    is_late: bool = False
    days_late: Optional[int] = Field(default=None, ge=0)
    submitted_at: Optional[str] = None
    graded_at: Optional[str] = None
    returned_at: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="after")
    def check_grading_invariants(self):
        graded = self.status in ("graded", "returned")
        if graded and self.adjusted_grade is None:
            raise ValueError(f"adjusted_grade is required when status is {self.status!r}")
        if not graded and self.adjusted_grade is not None:
            raise ValueError(f"adjusted_grade must not be set when status is {self.status!r}")
        if self.adjusted_grade is not None and self.grade is None:
            raise ValueError("adjusted_grade set without grade")
        if self.is_late and self.adjusted_grade is not None and self.adjusted_grade > self.grade:
            raise ValueError("adjusted_grade exceeds grade on a late submission")
        return self


class AttendanceRecord(BaseModel):
    student_id: str
    course_id: str
    module_id: str
    status: AttendanceStatus
    marked_at: str

    model_config = ConfigDict(from_attributes=True)


class AssignmentMeta(BaseModel):
    id: str
    course_id: str
    title: str = ""
    points: float = Field(gt=0)
    due_date: str
    late_penalty_per_day: float = Field(default=0.0, ge=0)
    created_at: str

    model_config = ConfigDict(from_attributes=True)


class ModuleMeta(BaseModel):
    id: str
    course_id: str
    title: str = ""
    order: int = 0

    model_config = ConfigDict(from_attributes=True)
