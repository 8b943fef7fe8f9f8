"""
Course and curriculum repositories.
"""

from uuid import UUID
from sqlalchemy import Select, select, update

from records_api.core.auth.interfaces import CourseOwnershipSource
from records_api.models.course import Course, Curriculum, CurriculumCourse
from records_api.models.person import Person, Teacher

from .base import BaseRepository


class CourseRepository(BaseRepository[Course], CourseOwnershipSource):
    """Courses; soft-deleted rows are hidden from every query."""

    model = Course

    def _base_query(self) -> Select:
        return select(Course).where(Course.deleted.is_(False))

    async def get_owned_courses(self, teacher_email: str) -> list[Course]:
        stmt = (
            self._base_query()
            .join(Teacher, Course.teacher_id == Teacher.id)
            .join(Person, Teacher.person_id == Person.id)
            .where(Person.email == teacher_email, Teacher.active.is_(True))
            .order_by(Course.name)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_active(self) -> list[Course]:
        stmt = self._base_query().order_by(Course.name)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def name_taken(self, name: str, teacher_id: UUID, exclude_id: UUID | None = None) -> bool:
        # Deleted courses keep their name reserved (unique per teacher)
        stmt = select(Course.id).where(Course.name == name, Course.teacher_id == teacher_id)
        if exclude_id is not None:
            stmt = stmt.where(Course.id != exclude_id)
        result = await self.db.execute(stmt)
        return result.first() is not None

    async def soft_delete_by_name(self, name: str) -> int:
        """Mark every course called ``name`` deleted. Returns the number of rows."""
        stmt = (
            update(Course)
            .where(Course.name == name, Course.deleted.is_(False))
            .values(deleted=True)
        )
        result = await self.db.execute(stmt)
        return result.rowcount


class CurriculumRepository(BaseRepository[Curriculum]):
    model = Curriculum

    async def get_by_name(self, name: str) -> Curriculum | None:
        return await self.get_one(name=name)

    async def list_all(self) -> list[Curriculum]:
        stmt = select(Curriculum).order_by(Curriculum.name)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def add_course(
        self,
        curriculum: Curriculum,
        course: Course,
        curriculum_points: int,
    ) -> CurriculumCourse:
        link = CurriculumCourse(
            curriculum_id=curriculum.id,
            course_id=course.id,
            course=course,
            curriculum_points=curriculum_points,
        )
        self.db.add(link)
        await self.db.flush()
        await self.db.refresh(curriculum, attribute_names=["courses"])
        return link

    async def has_course(self, curriculum: Curriculum, course_id: UUID) -> bool:
        stmt = select(CurriculumCourse.id).where(
            CurriculumCourse.curriculum_id == curriculum.id,
            CurriculumCourse.course_id == course_id,
        )
        return await self.db.scalar(stmt) is not None
