# easyshop/models/user.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Application account mirrored from the identity provider.

    Identity:
      - username: MUST match the "sub" claim of access tokens

    Role:
      - "user" | "admin"
      - anonymous callers have no row and no token.

    Rows are created by the authentication subsystem; this service only
    reads them.
    """

    __tablename__ = "users"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    username: str = Field(
        max_length=50,
        unique=True,
        index=True,
        description="Login name; the token subject",
    )

    # Application role
    role: str = Field(
        default="user",
        index=True,
        description="Application role: user | admin",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
