"""
People service: students and teachers managed by admins.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.core.auth import hash_password
from records_api.core.exceptions import InvalidRequest, RecordConflict, RecordNotFound
from records_api.models.person import Person
from records_api.repositories.people import (
    MembershipRepository,
    PersonRepository,
    StudentRepository,
    TeacherRepository,
)
from records_api.schemas.people import PersonCreate, PersonUpdate

logger = structlog.get_logger()

MANAGED_ROLES = ("student", "teacher")


class PeopleService:
    """
    Student and teacher membership management.

    ``role`` arguments are the lowercase names in MANAGED_ROLES.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.people = PersonRepository(db)
        self._members = {
            "student": StudentRepository(db),
            "teacher": TeacherRepository(db),
        }

    def members(self, role: str) -> MembershipRepository:
        try:
            return self._members[role]
        except KeyError:
            raise InvalidRequest(f"role must be one of {', '.join(MANAGED_ROLES)}") from None

    async def list_members(self, role: str) -> list[Person]:
        """Active members of ``role``, ordered by email."""
        return [m.person for m in await self.members(role).list_active()]

    async def member_emails(self, role: str) -> list[str]:
        return [p.email for p in await self.list_members(role)]

    async def create_member(self, role: str, data: PersonCreate) -> Person:
        """
        Enrol a person as a student or teacher.

        An existing person (e.g. an admin who also teaches) keeps their
        current password and details; an archived membership is reactivated.
        """
        repo = self.members(role)

        person = await self.people.get_by_email(data.email)
        if person is None:
            if data.phone and await self.people.exists(phone=data.phone):
                raise RecordConflict(f"Phone {data.phone} is already registered")
            person = await self.people.create(
                email=data.email,
                name=data.name,
                phone=data.phone,
                password_hash=hash_password(data.password),
            )

        membership = await repo.get_by_email(data.email, active_only=False)
        if membership is None:
            await repo.create(person_id=person.id)
        elif membership.active:
            raise RecordConflict(f"{data.email} is already a {role}")
        else:
            await repo.update(membership, active=True)

        logger.info("member_created", role=role, email=data.email)
        return person

    async def update_member(self, role: str, data: PersonUpdate) -> Person:
        membership = await self.members(role).get_by_email(data.email)
        if membership is None:
            raise RecordNotFound(f"No active {role} with email {data.email}")

        person = membership.person
        changes = data.model_dump(exclude_unset=True, exclude={"email"})
        phone = changes.get("phone")
        if phone and phone != person.phone and await self.people.exists(phone=phone):
            raise RecordConflict(f"Phone {phone} is already registered")

        person = await self.people.update(person, **changes)
        logger.info("member_updated", role=role, email=data.email, fields=sorted(changes))
        return person

    async def archive_member(self, role: str, email: str) -> None:
        """Deactivate a membership; the person loses the role at next login."""
        repo = self.members(role)
        membership = await repo.get_by_email(email)
        if membership is None:
            raise RecordNotFound(f"No active {role} with email {email}")

        await repo.update(membership, active=False)
        logger.info("member_archived", role=role, email=email)
