"""
shopco/services/carts.py - Cart mutations.

A cart is one Firestore document per user holding an ordered list of line items.
Every operation is load -> transform in memory -> save; load and save are separate
calls, so two concurrent mutations of the same cart can overwrite each other
(last write wins).

Line item identity:
- add merges on the (id, size, color) variant,
- update targets the FIRST item with the given id,
- remove drops EVERY item with the given id (all variants).
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from shopco.core.errors import NotFoundError, storage_errors
from shopco.repositories import carts as repo
from shopco.schemas.cart import CartLineItem

logger = logging.getLogger("shopco.carts")

Item = Dict[str, Any]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# ---------- pure helpers ----------
def parse_item_id(raw: str) -> Optional[int]:
    """
    Lenient integer parse of a path segment: leading sign/digits win, trailing garbage
    is ignored ("12abc" -> 12), no digits -> None (matches no item).
    """
    m = _LEADING_INT.match(raw or "")
    return int(m.group(1)) if m else None


def _same_variant(item: Item, other: Item) -> bool:
    return (
        item.get("id") == other.get("id")
        and item.get("size") == other.get("size")
        and item.get("color") == other.get("color")
    )


def merge_item(items: List[Item], incoming: Item) -> List[Item]:
    """Add `incoming` to `items` in place: bump the matching variant or append it."""
    qty = incoming.get("quantity") or 1
    for it in items:
        if _same_variant(it, incoming):
            it["quantity"] = int(it.get("quantity") or 0) + qty
            break
    else:
        items.append({**incoming, "quantity": qty})
    return items


def set_quantity(items: List[Item], item_id: Optional[int], quantity: int) -> bool:
    """Set the first item with `item_id` to max(1, quantity). False if there is none."""
    for it in items:
        if item_id is not None and it.get("id") == item_id:
            it["quantity"] = max(1, quantity)
            return True
    return False


def remove_items(items: List[Item], item_id: Optional[int]) -> List[Item]:
    return [it for it in items if item_id is None or it.get("id") != item_id]


def _load_existing(db, user_id: str) -> Dict[str, Any]:
    cart = repo.get(db, user_id)
    if cart is None:
        raise NotFoundError("Cart not found")
    return cart


# ---------- operations ----------
def get_cart(db, user_id: str) -> List[Item]:
    with storage_errors("Error fetching cart"):
        cart = repo.get(db, user_id)
        if cart is None:
            logger.debug("Creating empty cart for user %s", user_id)
            repo.save(db, user_id, [])
            return []
    return cart["items"]


def add_item(db, user_id: str, item: CartLineItem) -> List[Item]:
    incoming = item.model_dump(exclude_none=True)
    with storage_errors("Error adding item to cart"):
        cart = repo.get(db, user_id) or {"items": []}
        items = merge_item(cart["items"], incoming)
        repo.save(db, user_id, items)
    logger.info("Added item %s to cart of user %s", incoming.get("id"), user_id)
    return items


def update_quantity(db, user_id: str, raw_item_id: str, quantity: int) -> List[Item]:
    with storage_errors("Error updating quantity"):
        cart = _load_existing(db, user_id)
        items = cart["items"]
        if not set_quantity(items, parse_item_id(raw_item_id), quantity):
            raise NotFoundError("Item not found in cart")
        repo.save(db, user_id, items)
    logger.info("Updated item %s quantity for user %s", raw_item_id, user_id)
    return items


def remove_item(db, user_id: str, raw_item_id: str) -> List[Item]:
    with storage_errors("Error removing item"):
        cart = _load_existing(db, user_id)
        items = remove_items(cart["items"], parse_item_id(raw_item_id))
        repo.save(db, user_id, items)
    logger.info("Removed item %s from cart of user %s", raw_item_id, user_id)
    return items


def clear_cart(db, user_id: str) -> List[Item]:
    with storage_errors("Error clearing cart"):
        _load_existing(db, user_id)
        repo.save(db, user_id, [])
    logger.info("Cleared cart of user %s", user_id)
    return []
