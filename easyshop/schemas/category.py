# easyshop/schemas/category.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class CategoryBase(SQLModel):
    """
    Shared fields for category payloads.
    """

    name: str = Field(max_length=50)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class CategoryCreate(CategoryBase):
    """
    Payload for creating a category (admin only).
    """

    model_config = ConfigDict(extra="forbid")


class CategoryUpdate(CategoryBase):
    """
    Full replacement payload for a category.

    An `id` in the body is accepted but ignored; the path decides
    which row is updated.
    """

    model_config = ConfigDict(extra="ignore")


class CategoryRead(CategoryBase):
    id: int
