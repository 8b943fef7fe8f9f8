"""
Repository pattern for data access.
"""

from records_api.repositories.base import BaseRepository
from records_api.repositories.people import (
    PersonRepository,
    StudentRepository,
    TeacherRepository,
)
from records_api.repositories.courses import CourseRepository, CurriculumRepository
from records_api.repositories.exams import ExamRepository

__all__ = [
    "BaseRepository",
    "PersonRepository",
    "StudentRepository",
    "TeacherRepository",
    "CourseRepository",
    "CurriculumRepository",
    "ExamRepository",
]
