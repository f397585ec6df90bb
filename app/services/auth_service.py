# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Access-key gate for the admin endpoints."""
import hmac
from typing import Optional

from app.core.errors import AccessDenied


class AuthService:
    def __init__(self, access_key: str):
        self._access_key = access_key

    @property
    def enabled(self) -> bool:
        return bool(self._access_key)

    def validate_access_key(self, key: Optional[str]) -> bool:
        if not self.enabled:
            return True
        if not key:
            return False
        return hmac.compare_digest(key.encode(), self._access_key.encode())

    def require(self, key: Optional[str]) -> None:
        if not self.validate_access_key(key):
            raise AccessDenied("Access key salah atau tidak ada")
