"""
Tests for the course ownership guard.
"""

from dataclasses import dataclass

import pytest

from records_api.core.auth import CourseOwnershipGuard, CourseOwnershipSource, Failure, FailureKind


@dataclass
class FakeCourse:
    name: str


class InMemoryOwnership(CourseOwnershipSource):
    def __init__(self, courses: dict[str, list[str]]):
        self.courses = courses

    async def get_owned_courses(self, teacher_email: str):
        return [FakeCourse(name) for name in self.courses.get(teacher_email, [])]


@pytest.fixture
def guard() -> CourseOwnershipGuard:
    return CourseOwnershipGuard(InMemoryOwnership({"t@uni.edu": ["Math", "Physics"]}))


@pytest.mark.asyncio
async def test_owned_course_is_returned(guard: CourseOwnershipGuard):
    course = await guard.authorize_exam_write("t@uni.edu", "Physics")

    assert course == FakeCourse("Physics")


@pytest.mark.asyncio
async def test_unowned_course(guard: CourseOwnershipGuard):
    result = await guard.authorize_exam_write("t@uni.edu", "History")

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.COURSE_NOT_OWNED


@pytest.mark.asyncio
async def test_name_match_is_exact(guard: CourseOwnershipGuard):
    result = await guard.authorize_exam_write("t@uni.edu", "math")

    assert isinstance(result, Failure)


@pytest.mark.asyncio
async def test_unknown_teacher_owns_nothing(guard: CourseOwnershipGuard):
    result = await guard.authorize_exam_write("nobody@uni.edu", "Math")

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.COURSE_NOT_OWNED
