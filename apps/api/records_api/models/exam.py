"""
Exam result model.
"""

from uuid import UUID
from sqlalchemy import Integer, Boolean, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID as PGUUID

from .base import Base, StandardMixin
from .course import Course
from .person import Student


class Exam(Base, StandardMixin):
    """Points a student scored in a course."""

    __tablename__ = "exams"
    __table_args__ = (
        CheckConstraint("points > 0", name="ck_exams_points_positive"),
    )

    course_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("courses.id"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("students.id"),
        nullable=False,
        index=True,
    )
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    course: Mapped[Course] = relationship(Course, lazy="joined")
    student: Mapped[Student] = relationship(Student, lazy="joined")

    def __repr__(self) -> str:
        return f"<Exam {self.course_id} {self.student_id} {self.points}>"
