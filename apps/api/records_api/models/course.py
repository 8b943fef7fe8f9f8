"""
Course and curriculum models.
"""

from uuid import UUID
from sqlalchemy import String, Integer, Boolean, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID as PGUUID

from .base import Base, StandardMixin, UUIDMixin
from .person import Teacher


class Course(Base, StandardMixin):
    """A subject taught by one teacher, e.g. Math."""

    __tablename__ = "courses"
    __table_args__ = (
        UniqueConstraint("name", "teacher_id", name="uq_courses_name_teacher"),
        CheckConstraint("number_of_seats > 0", name="ck_courses_seats_positive"),
    )

    teacher_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("teachers.id"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    number_of_seats: Mapped[int] = mapped_column(Integer, default=50, nullable=False)
    deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    teacher: Mapped[Teacher] = relationship(Teacher, lazy="joined")

    def __repr__(self) -> str:
        return f"<Course {self.name}>"


class Curriculum(Base, StandardMixin):
    """A programme of study with a pass threshold in curriculum points."""

    __tablename__ = "curricula"
    __table_args__ = (
        CheckConstraint(
            "required_points_to_pass > 0",
            name="ck_curricula_required_points_positive",
        ),
    )

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    required_points_to_pass: Mapped[int] = mapped_column(Integer, default=100, nullable=False)

    courses: Mapped[list["CurriculumCourse"]] = relationship(
        "CurriculumCourse",
        back_populates="curriculum",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Curriculum {self.name}>"


class CurriculumCourse(Base, UUIDMixin):
    """
    A course counted towards a curriculum.

    The same course can be worth different points in different curricula.
    """

    __tablename__ = "curriculum_courses"
    __table_args__ = (
        UniqueConstraint("curriculum_id", "course_id", name="uq_curriculum_courses_pair"),
        CheckConstraint("curriculum_points > 0", name="ck_curriculum_courses_points_positive"),
    )

    curriculum_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("curricula.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("courses.id"),
        nullable=False,
    )
    curriculum_points: Mapped[int] = mapped_column(Integer, nullable=False)

    curriculum: Mapped[Curriculum] = relationship(Curriculum, back_populates="courses")
    course: Mapped[Course] = relationship(Course, lazy="joined")
