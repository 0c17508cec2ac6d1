# easyshop/services/category_service.py
from fastapi import HTTPException, status
from sqlmodel import Session

from easyshop.models.category import Category
from easyshop.models.product import Product
from easyshop.repositories.category_repo import CategoryRepository
from easyshop.repositories.product_repo import ProductRepository
from easyshop.schemas.category import CategoryCreate, CategoryUpdate


class CategoryService:
    """
    Business logic for Category.
    """

    def __init__(self, repo: CategoryRepository, product_repo: ProductRepository):
        self.repo = repo
        self.product_repo = product_repo

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list(session)

    def get_category(self, session: Session, category_id: int) -> Category:
        category = self.repo.get_by_id(session, category_id)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )
        return category

    def list_products(self, session: Session, category_id: int) -> list[Product]:
        self.get_category(session, category_id)
        return self.product_repo.list_by_category(session, category_id)

    def create_category(self, session: Session, payload: CategoryCreate) -> Category:
        return self.repo.create(session, Category(**payload.model_dump()))

    def update_category(
        self,
        session: Session,
        category_id: int,
        payload: CategoryUpdate,
    ) -> Category:
        category = self.get_category(session, category_id)
        category.name = payload.name
        category.description = payload.description
        return self.repo.update(session, category)

    def delete_category(self, session: Session, category_id: int) -> None:
        """
        Delete an empty category.

        409 if products still reference it.
        """
        category = self.get_category(session, category_id)
        if self.product_repo.list_by_category(session, category_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Category still has products",
            )
        self.repo.delete(session, category)
