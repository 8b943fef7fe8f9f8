"""
Exam service.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.core.auth import AccessDenied, CourseOwnershipGuard, Failure
from records_api.core.exceptions import RecordNotFound
from records_api.models.exam import Exam
from records_api.repositories.courses import CourseRepository
from records_api.repositories.exams import ExamRepository
from records_api.repositories.people import StudentRepository
from records_api.schemas.exam import ExamCreate

logger = structlog.get_logger()


class ExamService:
    """Reading and recording exam results."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.exams = ExamRepository(db)
        self.students = StudentRepository(db)
        self.guard = CourseOwnershipGuard(CourseRepository(db))

    async def list_for_student(self, student_email: str) -> list[Exam]:
        return await self.exams.list_for_student(student_email)

    async def list_for_teacher(self, teacher_email: str) -> list[Exam]:
        return await self.exams.list_for_teacher(teacher_email)

    async def record(self, teacher_email: str, data: ExamCreate) -> Exam:
        """
        Record an exam result in one of the teacher's courses.

        Raises:
            AccessDenied(CourseNotOwned): the teacher does not teach the course
            RecordNotFound: no active student with that email
        """
        course = await self.guard.authorize_exam_write(teacher_email, data.course_name)
        if isinstance(course, Failure):
            raise AccessDenied(course)

        student = await self.students.get_by_email(data.student_email)
        if student is None:
            raise RecordNotFound(f"No active student with email {data.student_email}")

        exam = await self.exams.create(
            course_id=course.id,
            student_id=student.id,
            points=data.points,
        )
        logger.info(
            "exam_recorded",
            teacher=teacher_email,
            course=course.name,
            student=data.student_email,
            points=data.points,
        )
        return exam
