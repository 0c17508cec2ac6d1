# easyshop/schemas/product.py
from decimal import Decimal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class ProductBase(SQLModel):
    """
    Shared fields for product payloads and read models.
    """

    name: str = Field(max_length=100)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    category_id: int
    description: str | None = None
    color: str | None = Field(default=None, max_length=20)
    image_url: str | None = None
    stock: int = Field(default=0, ge=0)
    featured: bool = False

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class ProductCreate(ProductBase):
    """
    Payload for creating a product (admin only).
    """

    model_config = ConfigDict(extra="forbid")


class ProductUpdate(ProductBase):
    """
    Full replacement payload for a product (admin only).

    The target row is always the one named in the path. A `product_id`
    or `id` sent in the body is ignored so an update can never
    retarget another row or create a new one.
    """

    model_config = ConfigDict(extra="ignore")


class ProductRead(ProductBase):
    """
    Product representation for clients.
    """

    id: int


class ProductSearch(SQLModel):
    """
    Optional search filters.

    None means "no constraint". Any other value, including 0 or "",
    is an actual filter.
    """

    category_id: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    color: str | None = None
