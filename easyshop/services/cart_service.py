# easyshop/services/cart_service.py
from decimal import Decimal

from fastapi import HTTPException, status
from sqlmodel import Session

from easyshop.repositories.cart_repo import CartRepository
from easyshop.repositories.product_repo import ProductRepository
from easyshop.schemas.cart import (
    CartItemUpdate,
    ShoppingCartItemRead,
    ShoppingCartRead,
)
from easyshop.schemas.product import ProductRead


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - build the cart view from cart rows + current product data
      - reject adds for products that do not exist
      - delegate quantity rules (upsert, remove on <= 0) to the repository

    user_id always comes from the authenticated user (router dependency).
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo

    def get_cart(self, session: Session, user_id: int) -> ShoppingCartRead:
        """
        Return the materialized cart:
          - items keyed by product_id, each with product + quantity + line_total
          - total over all lines

        Lines whose product has been deleted are skipped. Prices are the
        current product prices.
        """
        rows = self.cart_repo.list_for_user(session, user_id)

        items: dict[int, ShoppingCartItemRead] = {}
        total = Decimal("0.00")

        for row in rows:
            product = self.product_repo.get_by_id(session, row.product_id)
            if product is None:
                continue

            line_total = product.price * row.quantity
            total += line_total
            items[row.product_id] = ShoppingCartItemRead(
                product=ProductRead.model_validate(product),
                quantity=row.quantity,
                line_total=line_total,
            )

        return ShoppingCartRead(items=items, total=total)

    def add_product(
        self,
        session: Session,
        user_id: int,
        product_id: int,
        quantity: int = 1,
    ) -> ShoppingCartRead:
        """
        Add `quantity` units of a product (additive) and return the cart.
        """
        if self.product_repo.get_by_id(session, product_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )

        self.cart_repo.add_item(session, user_id, product_id, quantity)
        return self.get_cart(session, user_id)

    def update_quantity(
        self,
        session: Session,
        user_id: int,
        product_id: int,
        payload: CartItemUpdate,
    ) -> ShoppingCartRead:
        """
        Set the quantity of a line. Zero or less removes it.
        """
        self.cart_repo.update_item(session, user_id, product_id, payload.quantity)
        return self.get_cart(session, user_id)

    def remove_item(self, session: Session, user_id: int, product_id: int) -> None:
        self.cart_repo.remove_item(session, user_id, product_id)

    def clear_cart(self, session: Session, user_id: int) -> None:
        self.cart_repo.clear_user_cart(session, user_id)
