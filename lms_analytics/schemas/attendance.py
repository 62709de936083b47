"""Attendance statistics schemas."""

from pydantic import BaseModel, ConfigDict


class AttendanceStats(BaseModel):
    student_id: str
    course_id: str
    total_sessions: int
    attended: int
    absent: int
    late: int
    excused: int
    attendance_percentage: float

    model_config = ConfigDict(from_attributes=True)


class AttendanceSummaryRow(BaseModel):
    student_id: str
    total_sessions: int
    attended: int
    absent: int
    late: int
    excused: int
    attendance_percentage: float

    model_config = ConfigDict(from_attributes=True)


class CourseAttendanceSummary(BaseModel):
    course_id: str
    summary: list[AttendanceSummaryRow]

    model_config = ConfigDict(from_attributes=True)
