"""
Course ownership guard.

A teacher may only record exam results for courses they teach. Nothing in
the schema enforces this, so the exam write path must call the guard first.
"""

from typing import Any

from .failures import Failure, FailureKind
from .interfaces import CourseOwnershipSource


class CourseOwnershipGuard:
    """Checks a teacher/course pair against the teacher's owned courses."""

    def __init__(self, source: CourseOwnershipSource):
        self.source = source

    async def authorize_exam_write(self, teacher_email: str, course_name: str) -> Any | Failure:
        """
        Return the owned course named ``course_name``, or CourseNotOwned.

        Names are compared exactly (case-sensitive).
        """
        for course in await self.source.get_owned_courses(teacher_email):
            if course.name == course_name:
                return course

        return Failure(
            FailureKind.COURSE_NOT_OWNED,
            detail=f"{course_name!r} is not taught by {teacher_email}",
        )
