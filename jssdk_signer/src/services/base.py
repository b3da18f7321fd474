from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..models import TicketRecord

TICKET_TTL_SECONDS = 7200


class TicketStore(ABC):
    """Clase base para almacenes del par access_token/jsapi_ticket.

    Las implementaciones no coordinan escrituras concurrentes: el último en
    escribir gana.
    """

    ticket_ttl: int = TICKET_TTL_SECONDS

    @abstractmethod
    def read(self, key: str) -> Optional[TicketRecord]:
        """Devuelve el registro guardado o None si no existe o no se puede decodificar."""
        raise NotImplementedError

    @abstractmethod
    def write(self, key: str, record: TicketRecord) -> None:
        """Persiste el registro; levanta CacheWriteError si el destino no es escribible."""
        raise NotImplementedError

    def is_fresh(self, record: Optional[TicketRecord], now: float) -> bool:
        if record is None:
            return False
        return now < record.obtained_at + self.ticket_ttl
