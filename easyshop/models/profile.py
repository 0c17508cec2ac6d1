# easyshop/models/profile.py
from sqlmodel import SQLModel, Field


class Profile(SQLModel, table=True):
    """
    Contact details for a user.

    user_id is both the primary key and the FK to users.id,
    so a user can own at most one profile.
    """

    __tablename__ = "profiles"

    user_id: int = Field(
        foreign_key="users.id",
        primary_key=True,
        ondelete="CASCADE",
    )

    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=200)
    address: str | None = Field(default=None, max_length=200)
    city: str | None = Field(default=None, max_length=50)
    state: str | None = Field(default=None, max_length=2)
    zip: str | None = Field(default=None, max_length=20)
