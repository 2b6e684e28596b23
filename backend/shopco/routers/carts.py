"""
shopco/routers/carts.py
Cart endpoints keyed by an opaque userId path segment.

Behavior
- GET creates an empty cart on first access; update/remove/clear need an existing
  cart (404 "Cart not found" otherwise).
- Add merges on (id, size, color) and returns the whole cart.
- itemId path segments are parsed leniently ("7abc" -> 7, "abc" matches nothing).
"""
from fastapi import APIRouter, Body, Depends

from shopco.config import get_db
from shopco.schemas.cart import CartLineItem, CartResponse, QuantityUpdate
from shopco.services import carts as svc

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.get("/{user_id}", response_model=CartResponse, response_model_exclude_none=True)
def get_cart(user_id: str, db=Depends(get_db)):
    return CartResponse(cart=svc.get_cart(db, user_id))


@router.post("/{user_id}/add", response_model=CartResponse, response_model_exclude_none=True)
def add_to_cart(user_id: str, item: CartLineItem = Body(...), db=Depends(get_db)):
    items = svc.add_item(db, user_id, item)
    return CartResponse(message="Item added to cart", cart=items)


@router.put("/{user_id}/update/{item_id}", response_model=CartResponse, response_model_exclude_none=True)
def update_quantity(user_id: str, item_id: str, payload: QuantityUpdate, db=Depends(get_db)):
    items = svc.update_quantity(db, user_id, item_id, payload.quantity)
    return CartResponse(message="Quantity updated", cart=items)


@router.delete("/{user_id}/remove/{item_id}", response_model=CartResponse, response_model_exclude_none=True)
def remove_cart_item(user_id: str, item_id: str, db=Depends(get_db)):
    items = svc.remove_item(db, user_id, item_id)
    return CartResponse(message="Item removed from cart", cart=items)


@router.delete("/{user_id}/clear", response_model=CartResponse, response_model_exclude_none=True)
def clear_cart(user_id: str, db=Depends(get_db)):
    """Empty the cart; the document itself is kept."""
    return CartResponse(message="Cart cleared", cart=svc.clear_cart(db, user_id))
