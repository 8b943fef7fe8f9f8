"""
Course and curriculum services.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.core.exceptions import RecordConflict, RecordNotFound
from records_api.models.course import Course, Curriculum
from records_api.repositories.courses import CourseRepository, CurriculumRepository
from records_api.repositories.people import TeacherRepository
from records_api.schemas.course import (
    CourseCreate,
    CourseUpdate,
    CurriculumCourseLink,
    CurriculumCreate,
    CurriculumUpdate,
)

logger = structlog.get_logger()


class CourseService:
    """Course management."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.courses = CourseRepository(db)
        self.teachers = TeacherRepository(db)

    async def list_courses(self) -> list[Course]:
        return await self.courses.list_active()

    async def course_names_for(self, teacher_email: str) -> list[str]:
        return [c.name for c in await self.courses.get_owned_courses(teacher_email)]

    async def create(self, data: CourseCreate) -> Course:
        teacher = await self.teachers.get_by_email(data.teacher_email)
        if teacher is None:
            raise RecordNotFound(f"No active teacher with email {data.teacher_email}")

        if await self.courses.name_taken(data.name, teacher.id):
            raise RecordConflict(f"{data.teacher_email} already teaches {data.name}")

        course = await self.courses.create(
            teacher_id=teacher.id,
            name=data.name,
            number_of_seats=data.number_of_seats,
        )
        logger.info("course_created", course=course.name, teacher=data.teacher_email)
        return course

    async def update(self, data: CourseUpdate) -> Course:
        course = await self.courses.get_by_id(data.id)
        if course is None:
            raise RecordNotFound(f"No course with id {data.id}")

        changes = data.model_dump(exclude_unset=True, exclude={"id", "teacher_email"})

        teacher_id = course.teacher_id
        if data.teacher_email is not None:
            teacher = await self.teachers.get_by_email(data.teacher_email)
            if teacher is None:
                raise RecordNotFound(f"No active teacher with email {data.teacher_email}")
            teacher_id = teacher.id
            changes["teacher_id"] = teacher_id

        name = changes.get("name") or course.name
        if await self.courses.name_taken(name, teacher_id, exclude_id=course.id):
            raise RecordConflict(f"Course {name} already exists for that teacher")

        course = await self.courses.update(course, **changes)
        logger.info("course_updated", course_id=str(course.id), fields=sorted(changes))
        return course

    async def delete_by_name(self, name: str) -> int:
        """Soft delete every course with this name."""
        deleted = await self.courses.soft_delete_by_name(name)
        if not deleted:
            raise RecordNotFound(f"No course named {name}")
        logger.info("course_deleted", course=name, count=deleted)
        return deleted


class CurriculumService:
    """Curriculum management."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.curricula = CurriculumRepository(db)
        self.courses = CourseRepository(db)

    async def list_curricula(self) -> list[Curriculum]:
        return await self.curricula.list_all()

    async def create(self, data: CurriculumCreate) -> Curriculum:
        if await self.curricula.get_by_name(data.name) is not None:
            raise RecordConflict(f"Curriculum {data.name} already exists")
        curriculum = await self.curricula.create(**data.model_dump())
        logger.info("curriculum_created", curriculum=curriculum.name)
        return curriculum

    async def update(self, data: CurriculumUpdate) -> Curriculum:
        curriculum = await self.curricula.get_by_id(data.id)
        if curriculum is None:
            raise RecordNotFound(f"No curriculum with id {data.id}")

        changes = data.model_dump(exclude_unset=True, exclude={"id"})
        new_name = changes.get("name")
        if new_name and new_name != curriculum.name:
            if await self.curricula.get_by_name(new_name) is not None:
                raise RecordConflict(f"Curriculum {new_name} already exists")

        return await self.curricula.update(curriculum, **changes)

    async def delete_by_name(self, name: str) -> None:
        curriculum = await self.curricula.get_by_name(name)
        if curriculum is None:
            raise RecordNotFound(f"No curriculum named {name}")
        await self.curricula.delete(curriculum)
        logger.info("curriculum_deleted", curriculum=name)

    async def add_course(self, data: CurriculumCourseLink) -> Curriculum:
        curriculum = await self.curricula.get_by_name(data.curriculum_name)
        if curriculum is None:
            raise RecordNotFound(f"No curriculum named {data.curriculum_name}")

        course = await self.courses.get_by_id(data.course_id)
        if course is None:
            raise RecordNotFound(f"No course with id {data.course_id}")

        if await self.curricula.has_course(curriculum, course.id):
            raise RecordConflict(f"{course.name} is already part of {curriculum.name}")

        await self.curricula.add_course(curriculum, course, data.curriculum_points)
        return curriculum
