# easyshop/routers/categories.py
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from easyshop.core.auth import require_admin
from easyshop.database import get_session
from easyshop.repositories.category_repo import CategoryRepository
from easyshop.repositories.product_repo import ProductRepository
from easyshop.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from easyshop.schemas.product import ProductRead
from easyshop.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

repo = CategoryRepository()
service = CategoryService(repo, ProductRepository())


# -------- Public endpoints --------


@router.get("", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    return service.list_categories(session)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: int,
    session: Session = Depends(get_session),
):
    return service.get_category(session, category_id)


@router.get("/{category_id}/products", response_model=list[ProductRead])
def list_category_products(
    category_id: int,
    session: Session = Depends(get_session),
):
    """
    List the products of a category. 404 if the category does not exist.
    """
    return service.list_products(session, category_id)


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    return service.create_category(session, payload)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    dependencies=[Depends(require_admin)],
)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    session: Session = Depends(get_session),
):
    return service.update_category(session, category_id, payload)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_category(
    category_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a category (admin only). 409 while it still has products.
    """
    service.delete_category(session, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
