from typing import Optional, Dict, Any
from google.cloud.firestore_v1 import SERVER_TIMESTAMP
from google.cloud.firestore_v1.base_query import FieldFilter

from shopco.config import settings


def _col(db):
    return db.collection(settings.collection("users"))


def find_by_email(db, email: str) -> Optional[Dict[str, Any]]:
    """First account whose email matches exactly, with its document id under "id"."""
    docs = list(_col(db).where(filter=FieldFilter("email", "==", email)).limit(1).stream())
    if not docs:
        return None
    data = docs[0].to_dict() or {}
    data["id"] = docs[0].id
    return data


def create(db, email: str, password: str, name: Optional[str]) -> str:
    ref = _col(db).document()
    ref.set({
        "email": email,
        "password": password,
        "name": name,
        "createdAt": SERVER_TIMESTAMP,
    })
    return ref.id
