import hashlib
import hmac
from typing import Protocol

from shopco.config import Settings, settings


class PasswordHasher(Protocol):
    scheme: str

    def encode(self, password: str) -> str: ...

    def verify(self, password: str, stored: str) -> bool: ...


class PlaintextPasswords:
    """Stores passwords as received. Insecure; kept for legacy account data."""
    scheme = "plaintext"

    def encode(self, password: str) -> str:
        return password

    def verify(self, password: str, stored: str) -> bool:
        return hmac.compare_digest(password.encode("utf-8"), (stored or "").encode("utf-8"))


class HmacPasswords:
    """
    HMAC-SHA256 keyed with PASSWORD_SECRET (a server-wide pepper). There is no
    per-record salt, so equal passwords give equal digests; a salted KDF would be
    another PasswordHasher.
    """
    scheme = "hmac-sha256"

    def __init__(self, secret: str):
        self._key = secret.encode("utf-8")

    def encode(self, password: str) -> str:
        return hmac.new(self._key, password.encode("utf-8"), hashlib.sha256).hexdigest()

    def verify(self, password: str, stored: str) -> bool:
        return hmac.compare_digest(self.encode(password).encode("ascii"), (stored or "").encode("utf-8"))


def password_hasher_for(cfg: Settings) -> PasswordHasher:
    if cfg.password_scheme == "hmac-sha256":
        return HmacPasswords(cfg.password_secret)
    return PlaintextPasswords()


def get_password_hasher() -> PasswordHasher:
    """FastAPI dependency: hasher for the configured PASSWORD_SCHEME."""
    return password_hasher_for(settings)
