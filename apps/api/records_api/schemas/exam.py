"""
Exam schemas.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from records_api.models.exam import Exam


class ExamCreate(BaseModel):
    """Exam result recorded by a teacher."""
    student_email: EmailStr
    course_name: str = Field(min_length=1, max_length=255)
    points: int = Field(gt=0)


class ExamResponse(BaseModel):
    """Exam result as shown to students and teachers."""
    student_name: str
    student_email: str
    course_name: str
    points: int
    created_at: datetime

    @classmethod
    def from_model(cls, exam: Exam) -> "ExamResponse":
        return cls(
            student_name=exam.student.person.name,
            student_email=exam.student.person.email,
            course_name=exam.course.name,
            points=exam.points,
            created_at=exam.created_at,
        )
