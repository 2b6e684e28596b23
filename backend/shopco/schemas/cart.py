"""
shopco/schemas/cart.py - Pydantic models for carts.

Line items are stored denormalized (name/price/image copied at add time) and only
type-coerced: no field other than `id` is required. Integers are bounded to the
int64 range Firestore can store.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


class CartLineItem(BaseModel):
    id: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Product id (several variants may share it)")
    name: Optional[str] = Field(None, description="Display label")
    size: Optional[str] = Field(None, description="Variant size")
    color: Optional[str] = Field(None, description="Variant color")
    # int first so a whole-number price comes back exactly as sent
    price: Optional[Union[int, float]] = Field(None, description="Unit price at the time of adding to cart")
    quantity: Optional[int] = Field(None, ge=INT64_MIN, le=INT64_MAX,
                                    description="Quantity; defaults to 1 when absent or 0")
    image: Optional[str] = Field(None, description="Display image reference")


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., ge=INT64_MIN, le=INT64_MAX,
                          description="New quantity (values below 1 are stored as 1)")


class CartResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    cart: List[CartLineItem] = Field(default_factory=list)
