"""WeChat official-account credentials and the cache key derived from them."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Optional

from ..errors import MissingCredentialsError


@dataclass(frozen=True)
class Credentials:
    app_id: str
    app_secret: str

    def __post_init__(self):
        if not (self.app_id or "").strip() or not (self.app_secret or "").strip():
            raise MissingCredentialsError()

    @classmethod
    def from_values(cls, app_id: Optional[str], app_secret: Optional[str]) -> "Credentials":
        return cls(app_id=app_id or "", app_secret=app_secret or "")

    @property
    def cache_key(self) -> str:
        return cache_key(self.app_id, self.app_secret)

    def __repr__(self) -> str:
        return f"Credentials(app_id={self.app_id!r}, app_secret='***')"


def cache_key(app_id: str, app_secret: str) -> str:
    """md5(appId + appSecret) in lowercase hex; also the cache file name."""
    return hashlib.md5(f"{app_id}{app_secret}".encode("utf-8")).hexdigest()
