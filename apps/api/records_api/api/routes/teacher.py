"""
Teacher routes. Gated for the Teacher role (GET, POST).
"""

from fastapi import APIRouter, Depends

from records_api.core.auth import CallerEmail
from records_api.schemas.common import SUCCESS, MessageResponse
from records_api.schemas.exam import ExamCreate, ExamResponse
from records_api.services.course import CourseService
from records_api.services.exam import ExamService
from records_api.services.people import PeopleService
from records_api.api.dependencies.services import (
    get_course_service,
    get_exam_service,
    get_people_service,
)

router = APIRouter()


@router.get("/exams", response_model=list[ExamResponse])
async def course_exams(
    email: CallerEmail,
    exam_service: ExamService = Depends(get_exam_service),
):
    """Exam results recorded in the caller's courses."""
    exams = await exam_service.list_for_teacher(email)
    return [ExamResponse.from_model(e) for e in exams]


@router.post("/exams", response_model=MessageResponse)
async def record_exam(
    data: ExamCreate,
    email: CallerEmail,
    exam_service: ExamService = Depends(get_exam_service),
):
    """Record an exam result. The course must be one the caller teaches."""
    await exam_service.record(email, data)
    return SUCCESS


@router.get("/courses", response_model=list[str])
async def my_courses(
    email: CallerEmail,
    course_service: CourseService = Depends(get_course_service),
):
    """Names of the courses the caller teaches."""
    return await course_service.course_names_for(email)


@router.get("/students", response_model=list[str])
async def student_emails(
    people_service: PeopleService = Depends(get_people_service),
):
    """Emails of active students, for filling in exam results."""
    return await people_service.member_emails("student")
