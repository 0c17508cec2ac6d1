# easyshop/repositories/cart_repo.py
from sqlalchemy import delete, update
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlmodel import Session, select

from easyshop.models.cart import ShoppingCartItem


class CartRepository:
    """
    Data access layer for shopping_cart rows.

    Every write commits its own transaction. Missing rows are never an
    error: removals of absent lines are no-ops and reads return [].
    """

    # Get items for a user
    def list_for_user(self, session: Session, user_id: int) -> list[ShoppingCartItem]:
        stmt = (
            select(ShoppingCartItem)
            .where(ShoppingCartItem.user_id == user_id)
            .order_by(ShoppingCartItem.product_id)
        )
        return list(session.exec(stmt).all())

    def get_item(
        self, session: Session, user_id: int, product_id: int
    ) -> ShoppingCartItem | None:
        return session.get(ShoppingCartItem, (user_id, product_id))

    def add_item(
        self, session: Session, user_id: int, product_id: int, quantity: int
    ) -> None:
        """
        Insert a line, or add `quantity` to the existing one.

        Runs as one INSERT ... ON CONFLICT statement, so concurrent adds
        of the same product can neither create two rows nor lose an
        increment.
        """
        table = ShoppingCartItem.__table__
        dialect = session.get_bind().dialect.name

        if dialect in ("postgresql", "sqlite"):
            insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
            stmt = insert(table).values(
                user_id=user_id, product_id=product_id, quantity=quantity
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=[table.c.user_id, table.c.product_id],
                set_={"quantity": table.c.quantity + stmt.excluded.quantity},
            )
        elif dialect in ("mysql", "mariadb"):
            stmt = mysql.insert(table).values(
                user_id=user_id, product_id=product_id, quantity=quantity
            )
            stmt = stmt.on_duplicate_key_update(
                quantity=table.c.quantity + stmt.inserted.quantity
            )
        else:
            raise NotImplementedError(f"No atomic upsert for dialect {dialect!r}")

        session.execute(stmt)
        session.commit()

    def update_item(
        self, session: Session, user_id: int, product_id: int, quantity: int
    ) -> None:
        """
        Set the quantity of a line (absolute, not additive).

        quantity <= 0 removes the line. Updating a line that does not
        exist changes nothing.
        """
        if quantity <= 0:
            self.remove_item(session, user_id, product_id)
            return

        stmt = (
            update(ShoppingCartItem)
            .where(
                ShoppingCartItem.user_id == user_id,
                ShoppingCartItem.product_id == product_id,
            )
            .values(quantity=quantity)
        )
        session.execute(stmt)
        session.commit()

    def remove_item(self, session: Session, user_id: int, product_id: int) -> None:
        stmt = delete(ShoppingCartItem).where(
            ShoppingCartItem.user_id == user_id,
            ShoppingCartItem.product_id == product_id,
        )
        session.execute(stmt)
        session.commit()

    def clear_user_cart(self, session: Session, user_id: int) -> None:
        session.execute(
            delete(ShoppingCartItem).where(ShoppingCartItem.user_id == user_id)
        )
        session.commit()
