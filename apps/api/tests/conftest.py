"""
Pytest fixtures for testing.

Provides:
- Async database session shared by the app and the factories
- Test client wired to a freshly built app
- Factory fixtures for creating people, courses and exams
- Token helpers for each role
"""

import os

# Settings are read when records_api.main is imported
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_SECRET_KEY", "test-secret")

from datetime import timedelta
from typing import AsyncGenerator, Iterable
from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from records_api.main import create_app
from records_api.core.auth import Role, TokenCodec, hash_password
from records_api.core.config import AuthSettings, DatabaseSettings, Settings
from records_api.models import Admin, Course, Exam, Person, Student, Teacher
from records_api.models.base import Base
from records_api.api.dependencies.database import get_db
from records_api.utils.timezone import utc_now


# Test database URL (SQLite in-memory for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_SECRET = "test-secret"

DEFAULT_PASSWORD = "testpassword123"
# bcrypt is slow on purpose; hash the common password once per run
DEFAULT_PASSWORD_HASH = hash_password(DEFAULT_PASSWORD)

ROLE_MODELS = {
    Role.ADMIN: Admin,
    Role.STUDENT: Student,
    Role.TEACHER: Teacher,
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="testing",
        log_level="WARNING",
        log_format="text",
        database=DatabaseSettings(url=TEST_DATABASE_URL),
        auth=AuthSettings(secret_key=TEST_SECRET),
    )


@pytest.fixture
def codec(settings: Settings) -> TokenCodec:
    return TokenCodec.from_settings(settings.auth)


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create database session with automatic rollback.

    The same session serves the app and the factories, so rows created by
    a test are visible to the request without committing.
    """
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def app(settings: Settings, db: AsyncSession, db_engine) -> FastAPI:
    """Application with database session override."""
    app = create_app(settings)

    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.state.session_factory = async_sessionmaker(db_engine, class_=AsyncSession)
    return app


@pytest_asyncio.fixture(scope="function")
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Test client for the app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ============ Factory Fixtures ============


class RecordsFactory:
    """Factory for creating people, courses and exams."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _save(self, entity):
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def person(
        self,
        email: str | None = None,
        roles: Iterable[Role] = (),
        password: str = DEFAULT_PASSWORD,
        name: str = "Test Person",
        phone: str | None = None,
        active: bool = True,
    ) -> Person:
        """Create a person holding ``roles``."""
        email = email or f"person-{uuid4().hex[:8]}@uni.edu"
        password_hash = (
            DEFAULT_PASSWORD_HASH if password == DEFAULT_PASSWORD else hash_password(password)
        )
        person = await self._save(
            Person(email=email, name=name, phone=phone, password_hash=password_hash)
        )
        for role in roles:
            await self._save(ROLE_MODELS[role](person_id=person.id, active=active))
        return person

    async def membership(self, person: Person, role: Role):
        """Id of the role row linking ``person`` into ``role``."""
        model = ROLE_MODELS[role]
        return await self.db.scalar(select(model.id).where(model.person_id == person.id))

    async def course(
        self,
        teacher: Person,
        name: str = "Math",
        number_of_seats: int = 50,
        deleted: bool = False,
    ) -> Course:
        teacher_id = await self.membership(teacher, Role.TEACHER)
        return await self._save(
            Course(
                teacher_id=teacher_id,
                name=name,
                number_of_seats=number_of_seats,
                deleted=deleted,
            )
        )

    async def exam(
        self,
        course: Course,
        student: Person,
        points: int = 10,
        deleted: bool = False,
    ) -> Exam:
        student_id = await self.membership(student, Role.STUDENT)
        return await self._save(
            Exam(course_id=course.id, student_id=student_id, points=points, deleted=deleted)
        )


@pytest_asyncio.fixture
async def factory(db: AsyncSession) -> RecordsFactory:
    """Fixture that provides RecordsFactory."""
    return RecordsFactory(db)


@pytest_asyncio.fixture
async def admin(factory: RecordsFactory) -> Person:
    return await factory.person(email="admin@uni.edu", roles=[Role.ADMIN], name="Ada Admin")


@pytest_asyncio.fixture
async def teacher(factory: RecordsFactory) -> Person:
    return await factory.person(email="t@uni.edu", roles=[Role.TEACHER], name="Tom Teacher")


@pytest_asyncio.fixture
async def student(factory: RecordsFactory) -> Person:
    return await factory.person(email="s@uni.edu", roles=[Role.STUDENT], name="Sam Student")


# ============ Auth Helpers ============


def token_headers(
    codec: TokenCodec,
    email: str | None,
    roles: Iterable[Role | str],
    issued_at=None,
) -> dict[str, str]:
    """Authorization header carrying a freshly issued token (no Bearer prefix)."""
    token = codec.issue(email, roles, issued_at or utc_now())
    return {"Authorization": token}


@pytest.fixture
def admin_headers(codec: TokenCodec, admin: Person) -> dict[str, str]:
    return token_headers(codec, admin.email, [Role.ADMIN])


@pytest.fixture
def teacher_headers(codec: TokenCodec, teacher: Person) -> dict[str, str]:
    return token_headers(codec, teacher.email, [Role.TEACHER])


@pytest.fixture
def student_headers(codec: TokenCodec, student: Person) -> dict[str, str]:
    return token_headers(codec, student.email, [Role.STUDENT])


@pytest.fixture
def expired_issue_time(settings: Settings):
    """An issue time whose token expired one second ago."""
    return utc_now() - timedelta(minutes=settings.auth.token_ttl_minutes, seconds=1)
