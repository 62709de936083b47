"""Per-student performance timeline schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class AssignmentPerformanceEntry(BaseModel):
    assignment_id: str
    assignment_title: str
    due_date: str
    max_points: float
    grade: Optional[float] = None
    adjusted_grade: Optional[float] = None
    percentage: float
    submitted_at: Optional[str] = None
    is_late: bool
    status: str

    model_config = ConfigDict(from_attributes=True)


class AttendanceTrendPoint(BaseModel):
    date: str
    status: str
    module_id: str

    model_config = ConfigDict(from_attributes=True)


class PerformanceTimeline(BaseModel):
    student_id: str
    course_id: str
    assignment_performance: List[AssignmentPerformanceEntry]
    attendance_trend: List[AttendanceTrendPoint]

    model_config = ConfigDict(from_attributes=True)
