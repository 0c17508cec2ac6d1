# easyshop/schemas/cart.py
from decimal import Decimal

from sqlmodel import SQLModel

from easyshop.schemas.product import ProductRead


class CartItemUpdate(SQLModel):
    """
    Payload for setting the quantity of a cart line.

    Zero or a negative number removes the line.
    """

    quantity: int


class ShoppingCartItemRead(SQLModel):
    """
    A cart line joined with the current product data.
    """

    product: ProductRead
    quantity: int
    line_total: Decimal


class ShoppingCartRead(SQLModel):
    """
    Materialized cart view keyed by product id, with the cart total.
    """

    items: dict[int, ShoppingCartItemRead]
    total: Decimal
