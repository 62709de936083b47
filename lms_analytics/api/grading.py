"""Grading endpoints: late-penalty adjustment and the grade/return actions."""

from fastapi import APIRouter, HTTPException, status

from lms_analytics.schemas.records import SubmissionRecord
from lms_analytics.schemas.snapshots import (
    GradeAdjustmentRequest,
    GradeAdjustmentResult,
    GradeSubmissionRequest,
    ReturnSubmissionRequest,
)
from lms_analytics.services.grading import adjust_grade, grade_submission, return_submission

router = APIRouter(prefix="/grading", tags=["grading"])


@router.post("/adjust", response_model=GradeAdjustmentResult)
async def adjust(payload: GradeAdjustmentRequest):
    adjusted = adjust_grade(
        payload.raw_grade,
        payload.is_late,
        payload.days_late,
        payload.late_penalty_per_day,
    )
    return {"adjusted_grade": adjusted}


@router.post("/grade-submission", response_model=SubmissionRecord)
async def grade(payload: GradeSubmissionRequest):
    try:
        return grade_submission(
            payload.submission,
            payload.assignment,
            payload.grade,
            graded_at=payload.graded_at,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/return-submission", response_model=SubmissionRecord)
async def return_graded(payload: ReturnSubmissionRequest):
    try:
        return return_submission(payload.submission, returned_at=payload.returned_at)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
