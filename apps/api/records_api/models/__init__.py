"""
Database models.
"""

from .base import (
    Base,
    TimestampMixin,
    UUIDMixin,
    StandardMixin,
)
from .person import Person, Admin, Student, Teacher
from .course import Course, Curriculum, CurriculumCourse
from .exam import Exam

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "StandardMixin",
    # Models
    "Person",
    "Admin",
    "Student",
    "Teacher",
    "Course",
    "Curriculum",
    "CurriculumCourse",
    "Exam",
]
