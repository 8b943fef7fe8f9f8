"""
Person and role membership repositories.
"""

from typing import TypeVar
from sqlalchemy import Select, select

from records_api.core.auth.interfaces import CredentialStore, Role
from records_api.models.person import Person, Admin, Student, Teacher

from .base import BaseRepository

MemberT = TypeVar("MemberT", Admin, Student, Teacher)

# Order roles appear in issued tokens
ROLE_TABLES = (
    (Role.ADMIN, Admin),
    (Role.STUDENT, Student),
    (Role.TEACHER, Teacher),
)


class PersonRepository(BaseRepository[Person], CredentialStore):
    model = Person

    async def get_by_email(self, email: str) -> Person | None:
        return await self.get_one(email=email)

    async def get_password_hash(self, email: str) -> str | None:
        stmt = select(Person.password_hash).where(Person.email == email)
        return await self.db.scalar(stmt)

    async def get_roles(self, email: str) -> list[Role]:
        """Roles the person currently holds (active memberships only)."""
        roles = []
        for role, table in ROLE_TABLES:
            stmt = (
                select(table.id)
                .join(Person, table.person_id == Person.id)
                .where(Person.email == email, table.active.is_(True))
            )
            if await self.db.scalar(stmt) is not None:
                roles.append(role)
        return roles


class MembershipRepository(BaseRepository[MemberT]):
    """Queries shared by the admin, student and teacher tables."""

    def _by_email(self, email: str) -> Select:
        return (
            select(self.model)
            .join(Person, self.model.person_id == Person.id)
            .where(Person.email == email)
        )

    async def get_by_email(self, email: str, active_only: bool = True) -> MemberT | None:
        stmt = self._by_email(email)
        if active_only:
            stmt = stmt.where(self.model.active.is_(True))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active(self) -> list[MemberT]:
        stmt = (
            select(self.model)
            .join(Person, self.model.person_id == Person.id)
            .where(self.model.active.is_(True))
            .order_by(Person.email)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())


class StudentRepository(MembershipRepository[Student]):
    model = Student


class TeacherRepository(MembershipRepository[Teacher]):
    model = Teacher
