"""
Student routes. Gated for the Student role (GET only).
"""

from fastapi import APIRouter, Depends

from records_api.core.auth import CallerEmail
from records_api.schemas.exam import ExamResponse
from records_api.services.exam import ExamService
from records_api.api.dependencies.services import get_exam_service

router = APIRouter()


@router.get("/exams", response_model=list[ExamResponse])
async def my_exams(
    email: CallerEmail,
    exam_service: ExamService = Depends(get_exam_service),
):
    """The caller's own exam results."""
    exams = await exam_service.list_for_student(email)
    return [ExamResponse.from_model(e) for e in exams]
