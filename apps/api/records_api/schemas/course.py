"""
Course and curriculum schemas.
"""

from uuid import UUID
from pydantic import BaseModel, EmailStr, Field, field_validator

from records_api.models.course import Course, Curriculum


class CourseCreate(BaseModel):
    teacher_email: EmailStr
    name: str = Field(min_length=1, max_length=255)
    number_of_seats: int = Field(default=50, gt=0)


class CourseUpdate(BaseModel):
    """Partial course update; ``id`` selects the course."""
    id: UUID
    teacher_email: EmailStr | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    number_of_seats: int | None = Field(None, gt=0)

    @field_validator("teacher_email", "name", "number_of_seats")
    @classmethod
    def reject_null(cls, v):
        # Omitted means unchanged; an explicit null would clear a required column
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class CourseResponse(BaseModel):
    id: UUID
    name: str
    number_of_seats: int
    teacher_email: str
    teacher_name: str

    @classmethod
    def from_model(cls, course: Course) -> "CourseResponse":
        return cls(
            id=course.id,
            name=course.name,
            number_of_seats=course.number_of_seats,
            teacher_email=course.teacher.person.email,
            teacher_name=course.teacher.person.name,
        )


class CurriculumCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    required_points_to_pass: int = Field(default=100, gt=0)


class CurriculumUpdate(BaseModel):
    id: UUID
    name: str | None = Field(None, min_length=1, max_length=255)
    required_points_to_pass: int | None = Field(None, gt=0)

    @field_validator("name", "required_points_to_pass")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class CurriculumCourseLink(BaseModel):
    """Count a course towards a curriculum."""
    curriculum_name: str = Field(min_length=1)
    course_id: UUID
    curriculum_points: int = Field(gt=0)


class CurriculumCourseResponse(BaseModel):
    course_id: UUID
    course_name: str
    curriculum_points: int


class CurriculumResponse(BaseModel):
    id: UUID
    name: str
    required_points_to_pass: int
    courses: list[CurriculumCourseResponse]

    @classmethod
    def from_model(cls, curriculum: Curriculum) -> "CurriculumResponse":
        return cls(
            id=curriculum.id,
            name=curriculum.name,
            required_points_to_pass=curriculum.required_points_to_pass,
            courses=[
                CurriculumCourseResponse(
                    course_id=link.course_id,
                    course_name=link.course.name,
                    curriculum_points=link.curriculum_points,
                )
                for link in curriculum.courses
            ],
        )
