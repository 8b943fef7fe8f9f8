"""
Exam repository.
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import aliased

from records_api.models.course import Course
from records_api.models.exam import Exam
from records_api.models.person import Person, Student, Teacher

from .base import BaseRepository


class ExamRepository(BaseRepository[Exam]):
    """Exams; deleted exams and exams of deleted courses are hidden."""

    model = Exam

    def _base_query(self) -> Select:
        return (
            select(Exam)
            .join(Course, Exam.course_id == Course.id)
            .where(Exam.deleted.is_(False), Course.deleted.is_(False))
        )

    async def list_for_student(self, student_email: str) -> list[Exam]:
        stmt = (
            self._base_query()
            .join(Student, Exam.student_id == Student.id)
            .join(Person, Student.person_id == Person.id)
            .where(Person.email == student_email)
            .order_by(Exam.created_at, Course.name)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_for_teacher(self, teacher_email: str) -> list[Exam]:
        teacher_person = aliased(Person)
        stmt = (
            self._base_query()
            .join(Teacher, Course.teacher_id == Teacher.id)
            .join(teacher_person, Teacher.person_id == teacher_person.id)
            .where(teacher_person.email == teacher_email)
            .order_by(Course.name, Exam.created_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
