# easyshop/services/product_service.py
from decimal import Decimal

from fastapi import HTTPException, status
from sqlmodel import Session

from easyshop.models.product import Product
from easyshop.repositories.category_repo import CategoryRepository
from easyshop.repositories.product_repo import ProductRepository
from easyshop.schemas.product import ProductCreate, ProductSearch, ProductUpdate


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - search with optional filters
      - category existence checks on write
      - admin-only operations (enforced at router via require_admin)
    """

    def __init__(self, repo: ProductRepository, category_repo: CategoryRepository):
        self.repo = repo
        self.category_repo = category_repo

    # ----- Helpers -----

    def _ensure_category(self, session: Session, category_id: int) -> None:
        if self.category_repo.get_by_id(session, category_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )

    # ----- Products -----

    def search(self, session: Session, filters: ProductSearch) -> list[Product]:
        return self.repo.search(
            session,
            category_id=filters.category_id,
            min_price=filters.min_price,
            max_price=filters.max_price,
            color=filters.color,
        )

    def get_product(self, session: Session, product_id: int) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def create_product(self, session: Session, payload: ProductCreate) -> Product:
        self._ensure_category(session, payload.category_id)
        product = Product(**payload.model_dump())
        return self.repo.create(session, product)

    def update_product(
        self,
        session: Session,
        product_id: int,
        payload: ProductUpdate,
    ) -> Product:
        """
        Replace all fields of an existing product.

        404 if the product does not exist; nothing is created. The
        product is checked before the category it is moved to.
        """
        self.get_product(session, product_id)
        self._ensure_category(session, payload.category_id)
        product = self.repo.update(session, product_id, payload.model_dump())
        if product is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def delete_product(self, session: Session, product_id: int) -> None:
        if not self.repo.delete(session, product_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
