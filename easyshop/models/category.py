# easyshop/models/category.py
from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    Product grouping shown in the storefront navigation.
    """

    __tablename__ = "categories"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    name: str = Field(
        max_length=50,
        index=True,
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )
