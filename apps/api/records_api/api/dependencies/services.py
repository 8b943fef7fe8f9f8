"""
Service dependencies.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.core.auth import TokenCodec, get_token_codec
from records_api.services.auth import AuthService
from records_api.services.course import CourseService, CurriculumService
from records_api.services.exam import ExamService
from records_api.services.people import PeopleService
from .database import get_db


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthService:
    """Get auth service instance (login, password change)."""
    return AuthService(db, codec)


async def get_exam_service(db: AsyncSession = Depends(get_db)) -> ExamService:
    return ExamService(db)


async def get_course_service(db: AsyncSession = Depends(get_db)) -> CourseService:
    return CourseService(db)


async def get_curriculum_service(db: AsyncSession = Depends(get_db)) -> CurriculumService:
    return CurriculumService(db)


async def get_people_service(db: AsyncSession = Depends(get_db)) -> PeopleService:
    return PeopleService(db)
