# easyshop/models/product.py
from decimal import Decimal

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Columns:
      - id, name, price, category_id, description, color,
        image_url, stock, featured
    """

    __tablename__ = "products"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    name: str = Field(
        max_length=100,
        index=True,
        description="Display name of the product",
    )

    price: Decimal = Field(
        default=Decimal("0.00"),
        ge=0,
        max_digits=10,
        decimal_places=2,
        index=True,
        description="Unit price",
    )

    category_id: int = Field(
        foreign_key="categories.id",
        index=True,
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    color: str | None = Field(
        default=None,
        max_length=20,
        index=True,
    )

    image_url: str | None = Field(
        default=None,
        description="Main image file name or URL",
    )

    stock: int = Field(
        default=0,
        ge=0,
        description="How many units currently in stock",
    )

    featured: bool = Field(
        default=False,
        index=True,
        description="Whether the product is highlighted on the storefront",
    )
