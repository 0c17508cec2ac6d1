# easyshop/routers/products.py
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from easyshop.core.auth import require_admin
from easyshop.database import get_session
from easyshop.repositories.category_repo import CategoryRepository
from easyshop.repositories.product_repo import ProductRepository
from easyshop.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductSearch,
    ProductUpdate,
)
from easyshop.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo, CategoryRepository())


# -------- Public endpoints --------


@router.get("", response_model=list[ProductRead])
def search_products(
    session: Session = Depends(get_session),
    category_id: int | None = Query(default=None, alias="cat"),
    min_price: Decimal | None = Query(default=None, alias="minPrice"),
    max_price: Decimal | None = Query(default=None, alias="maxPrice"),
    color: str | None = Query(default=None),
):
    """
    Search products.

    - Public endpoint.
    - Every filter is optional; a parameter that is not sent does not
      constrain the result. `?color=` filters on the empty color.
    """
    filters = ProductSearch(
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        color=color,
    )
    return service.search(session, filters)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.

    - Public endpoint.
    """
    return service.get_product(session, product_id)


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product (admin only).
    """
    return service.create_product(session, payload)


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    dependencies=[Depends(require_admin)],
)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace an existing product (admin only).
    """
    return service.update_product(session, product_id, payload)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a product (admin only).
    """
    service.delete_product(session, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
