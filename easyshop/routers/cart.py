# easyshop/routers/cart.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from easyshop.core.auth import require_auth
from easyshop.database import get_session
from easyshop.models.user import User
from easyshop.repositories.cart_repo import CartRepository
from easyshop.repositories.product_repo import ProductRepository
from easyshop.schemas.cart import CartItemUpdate, ShoppingCartRead
from easyshop.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("", response_model=ShoppingCartRead)
def get_my_cart(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Get current user's cart, priced with current product data.
    """
    return service.get_cart(session, current_user.id)


@router.post(
    "/products/{product_id}",
    response_model=ShoppingCartRead,
    status_code=status.HTTP_201_CREATED,
)
def add_to_cart(
    product_id: int,
    quantity: int = Query(default=1, gt=0),
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Add a product to the current user's cart.

    Adding a product that is already in the cart increases its quantity.
    Returns the updated cart.
    """
    return service.add_product(session, current_user.id, product_id, quantity)


@router.put("/products/{product_id}", response_model=ShoppingCartRead)
def update_cart_item(
    product_id: int,
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Set the quantity of a product in the cart.

    A quantity of 0 or less removes the product.
    Returns the updated cart.
    """
    return service.update_quantity(
        session=session,
        user_id=current_user.id,
        product_id=product_id,
        payload=payload,
    )


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_cart_item(
    product_id: int,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Remove a product from the cart. Removing an absent product is a no-op.
    """
    service.remove_item(session, current_user.id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Clear the entire cart.
    """
    service.clear_cart(session, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
