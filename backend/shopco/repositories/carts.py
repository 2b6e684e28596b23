from typing import Optional, Dict, Any, List
from google.cloud.firestore_v1 import SERVER_TIMESTAMP

from shopco.config import settings


def _col(db):
    return db.collection(settings.collection("carts"))


def get(db, user_id: str) -> Optional[Dict[str, Any]]:
    snap = _col(db).document(user_id).get()
    if not snap.exists:
        return None
    data = snap.to_dict() or {}
    data["items"] = data.get("items") or []
    return data


def save(db, user_id: str, items: List[Dict[str, Any]]) -> None:
    """Overwrite the whole cart document (one document per user)."""
    _col(db).document(user_id).set({
        "userId": user_id,
        "items": items,
        "updatedAt": SERVER_TIMESTAMP,
    })
