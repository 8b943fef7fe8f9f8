"""
Person schemas.
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator


class PersonCreate(BaseModel):
    """New student or teacher, with the initial password they will log in with."""
    email: EmailStr
    name: str = Field(min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=50)
    password: str = Field(min_length=8, max_length=72)


class PersonUpdate(BaseModel):
    """Contact detail changes; ``email`` selects the person."""
    email: EmailStr
    name: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, v):
        # phone may be cleared with null; name may not
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class PersonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email: str
    name: str
    phone: str | None = None
