# easyshop/schemas/profile.py
from pydantic import ConfigDict, EmailStr, field_validator
from sqlmodel import SQLModel, Field


class ProfileBase(SQLModel):
    """
    Shared fields for profile payloads.

    Validation rules:
      - email must be a valid EmailStr when present
      - blank strings are stored as None
    """

    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    phone: str | None = Field(default=None, max_length=20)
    email: EmailStr | None = None
    address: str | None = Field(default=None, max_length=200)
    city: str | None = Field(default=None, max_length=50)
    state: str | None = Field(default=None, max_length=2)
    zip: str | None = Field(default=None, max_length=20)

    @field_validator(
        "first_name", "last_name", "phone", "address", "city", "state", "zip",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = str(v).strip()
        return v or None


class ProfileCreate(ProfileBase):
    """
    Payload for creating the caller's profile.

    The owner is always the authenticated user; a `user_id` in the
    body is ignored.
    """

    model_config = ConfigDict(extra="ignore")


class ProfileUpdate(ProfileBase):
    """
    Full replacement of the caller's profile fields.

    Fields left out are cleared. A `user_id` in the body is ignored:
    the authenticated user is always the target.
    """

    model_config = ConfigDict(extra="ignore")


class ProfileRead(SQLModel):
    """
    Response schema returned to clients.

    Plain strings: profiles are also written at registration, outside
    this service, so stored values are returned as they are.
    """

    user_id: int
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
