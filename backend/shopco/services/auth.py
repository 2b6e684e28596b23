import logging
from typing import Any, Dict, Optional

from shopco.core.errors import AlreadyExistsError, InvalidCredentialsError, storage_errors
from shopco.core.passwords import PasswordHasher
from shopco.repositories import users as repo

logger = logging.getLogger("shopco.auth")


def register(db, hasher: PasswordHasher, email: str, password: str, name: Optional[str]) -> str:
    """Create an account and return its id. Emails are unique (exact match)."""
    with storage_errors("Error registering user"):
        if repo.find_by_email(db, email) is not None:
            raise AlreadyExistsError("User already exists")
        user_id = repo.create(db, email, hasher.encode(password), name)
    logger.info("Registered user %s", user_id)
    return user_id


def login(db, hasher: PasswordHasher, email: str, password: str) -> Dict[str, Any]:
    """
    Check email + password. Returns {id, email, name}; the stored password never
    leaves this function. No session or token is created.
    """
    with storage_errors("Error logging in"):
        user = repo.find_by_email(db, email)
    if user is None or not hasher.verify(password, user.get("password")):
        logger.info("Rejected login for %s", email)
        raise InvalidCredentialsError("Invalid credentials")
    return {"id": user["id"], "email": user.get("email"), "name": user.get("name")}
