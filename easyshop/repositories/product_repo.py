# easyshop/repositories/product_repo.py
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, func, update
from sqlmodel import Session, select

from easyshop.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    - "Not found" is returned as None / False, never raised.
    """

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        return session.get(Product, product_id)

    def count(self, session: Session) -> int:
        value = session.exec(select(func.count()).select_from(Product)).one()
        return int(value or 0)

    def search(
        self,
        session: Session,
        category_id: int | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        color: str | None = None,
    ) -> list[Product]:
        """
        Filtered product listing.

        Only filters that are not None become part of the WHERE clause,
        so an empty string or a negative price is matched literally.
        Price bounds are inclusive; an inverted range matches nothing.
        """
        stmt = select(Product)
        if category_id is not None:
            stmt = stmt.where(Product.category_id == category_id)
        if min_price is not None:
            stmt = stmt.where(Product.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(Product.price <= max_price)
        if color is not None:
            stmt = stmt.where(Product.color == color)
        stmt = stmt.order_by(Product.id)
        return list(session.exec(stmt).all())

    def list_by_category(self, session: Session, category_id: int) -> list[Product]:
        return self.search(session, category_id=category_id)

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def update(
        self,
        session: Session,
        product_id: int,
        values: dict[str, Any],
    ) -> Product | None:
        """
        Overwrite the row whose id equals product_id.

        Returns the refreshed Product, or None when no such row exists.
        Never inserts.
        """
        values = {k: v for k, v in values.items() if k != "id"}
        stmt = update(Product).where(Product.id == product_id).values(**values)
        result = session.execute(stmt)
        session.commit()
        if result.rowcount == 0:
            return None
        return session.get(Product, product_id, populate_existing=True)

    def delete(self, session: Session, product_id: int) -> bool:
        """Delete a product by id. Returns False if it did not exist."""
        result = session.execute(delete(Product).where(Product.id == product_id))
        session.commit()
        return result.rowcount > 0
