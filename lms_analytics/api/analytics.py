"""Analytics endpoints: post an already-fetched record snapshot, get metrics back."""

from datetime import date

from fastapi import APIRouter

from lms_analytics.schemas.analytics import AssignmentStats, CourseAnalytics, InstructorDashboard
from lms_analytics.schemas.attendance import AttendanceStats, CourseAttendanceSummary
from lms_analytics.schemas.performance import PerformanceTimeline
from lms_analytics.schemas.progress import CourseStudentsProgress, StudentProgress
from lms_analytics.schemas.snapshots import (
    AssignmentStatsSnapshot,
    CourseAnalyticsSnapshot,
    CourseAttendanceSnapshot,
    CourseStudentsSnapshot,
    InstructorDashboardSnapshot,
    PerformanceTimelineSnapshot,
    StudentAttendanceSnapshot,
    StudentProgressSnapshot,
)
from lms_analytics.services.assignment_stats_reporting import get_assignment_stats
from lms_analytics.services.attendance_reporting import get_course_attendance_summary, get_student_attendance_stats
from lms_analytics.services.course_analytics_reporting import get_course_analytics
from lms_analytics.services.instructor_dashboard_service import get_instructor_dashboard
from lms_analytics.services.performance_timeline import get_student_performance_timeline
from lms_analytics.services.student_progress_reporting import get_course_students_progress, get_student_progress

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.post("/student-progress", response_model=StudentProgress)
async def student_progress(snapshot: StudentProgressSnapshot):
    return get_student_progress(
        snapshot.enrollment,
        module_progress=snapshot.module_progress,
        submissions=snapshot.submissions,
        attendance=snapshot.attendance,
        modules=snapshot.modules,
        assignments=snapshot.assignments,
    )


@router.post("/course-students-progress", response_model=CourseStudentsProgress)
async def course_students_progress(snapshot: CourseStudentsSnapshot):
    return get_course_students_progress(
        snapshot.enrollments,
        submissions=snapshot.submissions,
        attendance=snapshot.attendance,
    )


@router.post("/course-analytics", response_model=CourseAnalytics, response_model_exclude_none=True)
async def course_analytics(snapshot: CourseAnalyticsSnapshot, today: date | None = None):
    return get_course_analytics(
        snapshot.course_id,
        enrollments=snapshot.enrollments,
        module_progress=snapshot.module_progress,
        submissions=snapshot.submissions,
        attendance=snapshot.attendance,
        modules=snapshot.modules,
        today=today,
    )


@router.post("/attendance/student-stats", response_model=AttendanceStats)
async def student_attendance_stats(snapshot: StudentAttendanceSnapshot):
    return get_student_attendance_stats(snapshot.student_id, snapshot.course_id, snapshot.records)


@router.post("/attendance/course-summary", response_model=CourseAttendanceSummary)
async def course_attendance_summary(snapshot: CourseAttendanceSnapshot):
    return get_course_attendance_summary(
        snapshot.course_id,
        enrollments=snapshot.enrollments,
        attendance=snapshot.attendance,
    )


@router.post("/performance-timeline", response_model=PerformanceTimeline)
async def performance_timeline(snapshot: PerformanceTimelineSnapshot):
    return get_student_performance_timeline(
        snapshot.student_id,
        snapshot.course_id,
        assignments=snapshot.assignments,
        submissions=snapshot.submissions,
        attendance=snapshot.attendance,
    )


@router.post("/assignment-stats", response_model=AssignmentStats)
async def assignment_stats(snapshot: AssignmentStatsSnapshot):
    return get_assignment_stats(snapshot.assignment, snapshot.submissions, total_enrolled=snapshot.total_enrolled)


@router.post("/instructor-dashboard", response_model=InstructorDashboard)
async def instructor_dashboard(snapshot: InstructorDashboardSnapshot):
    return get_instructor_dashboard(snapshot.courses)
