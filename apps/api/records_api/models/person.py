"""
Person and role membership models.

A person holds a role when an active row links them into the matching role
table. Email is the external identity everywhere in the API.
"""

from uuid import UUID
from sqlalchemy import String, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID as PGUUID

from .base import Base, StandardMixin, UUIDMixin


class Person(Base, StandardMixin):
    """Anyone who can log in."""

    __tablename__ = "people"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), unique=True, nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Person {self.email}>"


class RoleMembershipMixin(UUIDMixin):
    """Columns shared by the role tables."""

    person_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("people.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class Admin(Base, RoleMembershipMixin):
    __tablename__ = "admins"

    person: Mapped[Person] = relationship(Person, lazy="joined")


class Student(Base, RoleMembershipMixin):
    __tablename__ = "students"

    person: Mapped[Person] = relationship(Person, lazy="joined")

    def __repr__(self) -> str:
        return f"<Student {self.person_id}>"


class Teacher(Base, RoleMembershipMixin):
    __tablename__ = "teachers"

    person: Mapped[Person] = relationship(Person, lazy="joined")

    def __repr__(self) -> str:
        return f"<Teacher {self.person_id}>"
