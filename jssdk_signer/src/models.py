from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TicketRecord:
    access_token: str
    ticket: str
    obtained_at: int


@dataclass(frozen=True)
class SigningContext:
    url: str
    ticket: str
    timestamp: int
    nonce: str


@dataclass(frozen=True)
class ConfigOutput:
    debug: bool
    app_id: str
    timestamp: int
    nonce: str
    signature: str

    def to_dict(self) -> Dict[str, Any]:
        """Forma esperada por ``wx.config(...)`` en el cliente."""
        return {
            "debug": self.debug,
            "appId": self.app_id,
            "timestamp": self.timestamp,
            "nonceStr": self.nonce,
            "signature": self.signature,
        }
