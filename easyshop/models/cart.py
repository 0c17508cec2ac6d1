# easyshop/models/cart.py
from sqlmodel import SQLModel, Field


class ShoppingCartItem(SQLModel, table=True):
    """
    Shopping cart line for a user.

    The composite primary key (user_id, product_id) guarantees a user
    cannot have 2 rows for the same product. quantity is always >= 1;
    a line that drops to zero is deleted instead.
    """

    __tablename__ = "shopping_cart"

    user_id: int = Field(
        foreign_key="users.id",
        primary_key=True,
        ondelete="CASCADE",
    )

    product_id: int = Field(
        foreign_key="products.id",
        primary_key=True,
        ondelete="CASCADE",
    )

    quantity: int = Field(
        gt=0,
        description="Must be >= 1",
    )
