"""Caché en archivo del ticket del JS-SDK.

Un archivo por par de credenciales, nombrado con la clave de caché y con el
contenido ``base64(json({"access_token", "ticket", "time"}))``.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..errors import CacheDecodeError, CacheWriteError
from ..models import TicketRecord
from .base import TICKET_TTL_SECONDS, TicketStore

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(__file__).resolve().parent


def encode_record(record: TicketRecord) -> str:
    payload = {
        "access_token": record.access_token,
        "ticket": record.ticket,
        "time": int(record.obtained_at),
    }
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def decode_record(raw: Union[str, bytes]) -> TicketRecord:
    try:
        data = json.loads(base64.b64decode(raw.strip(), validate=True).decode("utf-8"))
        return TicketRecord(
            access_token=str(data["access_token"]),
            ticket=str(data["ticket"]),
            obtained_at=int(data["time"]),
        )
    except (binascii.Error, UnicodeDecodeError, ValueError, KeyError, TypeError) as exc:
        raise CacheDecodeError() from exc


class FileTicketStore(TicketStore):
    def __init__(self, cache_path: Union[str, Path, None] = None, ticket_ttl: int = TICKET_TTL_SECONDS):
        self.cache_dir = Path(cache_path) if cache_path else DEFAULT_CACHE_DIR
        self.ticket_ttl = ticket_ttl

    def path_for(self, key: str) -> Path:
        return self.cache_dir / key

    def read(self, key: str) -> Optional[TicketRecord]:
        path = self.path_for(key)
        try:
            raw = path.read_bytes()
        except OSError:
            return None
        try:
            return decode_record(raw)
        except CacheDecodeError:
            logger.debug("Ignoring undecodable ticket cache at %s", path)
            return None

    def write(self, key: str, record: TicketRecord) -> None:
        if not self.cache_dir.is_dir() or not os.access(self.cache_dir, os.W_OK):
            raise CacheWriteError()
        path = self.path_for(key)
        try:
            path.write_text(encode_record(record), encoding="utf-8")
        except OSError as exc:
            raise CacheWriteError() from exc
        logger.info("Ticket cache written to %s", path)
