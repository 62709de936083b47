"""Progress schemas for per-student analytics."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

CompletionStatus = Literal["not_started", "in_progress", "completed", "dropped"]


class ModuleProgressEntry(BaseModel):
    module_id: str
    module_title: str
    progress_percentage: float
    completed_at: Optional[str] = None
    time_spent_minutes: int

    model_config = ConfigDict(from_attributes=True)


class StudentProgress(BaseModel):
    student_id: str
    course_id: str
    overall_progress_percentage: float
    modules_completed: int
    total_modules: int
    total_time_spent_minutes: int
    average_assignment_score: float
    assignments_completed: int
    total_assignments: int
    attendance_percentage: float
    classes_attended: int
    total_classes: int
    is_active: bool
    completion_status: CompletionStatus
    enrolled_at: str
    last_accessed_at: str
    actual_completion_date: Optional[str] = None
    module_progress: List[ModuleProgressEntry]

    model_config = ConfigDict(from_attributes=True)


class StudentProgressRow(BaseModel):
    student_id: str
    overall_progress: float
    assignments_completed: int
    average_score: float
    attendance_percentage: float
    last_accessed: str
    status: str

    model_config = ConfigDict(from_attributes=True)


class CourseStudentsProgress(BaseModel):
    students: List[StudentProgressRow]
    total: int

    model_config = ConfigDict(from_attributes=True)
