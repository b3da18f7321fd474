"""Servicio que arma la configuración firmada para ``wx.config`` del JS-SDK.

Uso:
    signer = JsSdkSigner(app_id, app_secret, url="https://example.com/page")
    config = signer.get_config().to_dict()
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from ..config import Config
from ..models import ConfigOutput, SigningContext, TicketRecord
from ..signature import make_signature
from ..utils import make_nonce_str, strip_fragment
from .base import TicketStore
from .credentials import Credentials
from .ticket_cache import FileTicketStore
from .wechat_client import WeChatClient

logger = logging.getLogger(__name__)


class JsSdkSigner:
    def __init__(
        self,
        app_id: Optional[str],
        app_secret: Optional[str],
        url: Optional[str] = None,
        debug: bool = False,
        use_cache: bool = True,
        cache_path: Union[str, Path, None] = None,
        *,
        client: Optional[WeChatClient] = None,
        store: Optional[TicketStore] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.credentials = Credentials.from_values(app_id, app_secret)
        # La URL la resuelve quien llama (p. ej. la ruta Flask), nunca este servicio.
        if not url:
            raise ValueError("url is required (full page URL including http/https)")
        self.url = strip_fragment(url)
        self.debug = bool(debug)
        self.use_cache = bool(use_cache)
        self.client = client or WeChatClient()
        self.store = store or FileTicketStore(cache_path)
        self.clock = clock
        # Una sola vez por instancia; todas las llamadas reutilizan el mismo nonce.
        self.nonce = make_nonce_str()

    @classmethod
    def from_config(cls, url: str, **overrides) -> "JsSdkSigner":
        params = dict(
            app_id=Config.WECHAT_APP_ID,
            app_secret=Config.WECHAT_APP_SECRET,
            url=url,
            debug=Config.WECHAT_JSSDK_DEBUG,
            use_cache=Config.WECHAT_USE_CACHE,
            cache_path=Config.WECHAT_CACHE_PATH or None,
        )
        params.update(overrides)
        if "client" not in params:
            params["client"] = WeChatClient(
                timeout=Config.WECHAT_HTTP_TIMEOUT,
                verify_tls=Config.WECHAT_VERIFY_TLS,
            )
        return cls(**params)

    def _fetch_record(self, now: int) -> TicketRecord:
        creds = self.credentials
        access_token = self.client.fetch_access_token(creds.app_id, creds.app_secret)
        ticket = self.client.fetch_ticket(access_token)
        return TicketRecord(access_token=access_token, ticket=ticket, obtained_at=now)

    def _resolve_ticket(self, now: int) -> Tuple[str, int]:
        if not self.use_cache:
            record = self._fetch_record(now)
            return record.ticket, record.obtained_at

        key = self.credentials.cache_key
        cached = self.store.read(key)
        if self.store.is_fresh(cached, now):
            logger.info("Ticket cache hit for appid=%s", self.credentials.app_id)
            # Se conserva el timestamp de emisión del ticket, no la hora actual.
            return cached.ticket, cached.obtained_at

        logger.info("Ticket cache miss for appid=%s", self.credentials.app_id)
        record = self._fetch_record(now)
        self.store.write(key, record)
        return record.ticket, record.obtained_at

    def get_config(self) -> ConfigOutput:
        now = int(self.clock())
        ticket, timestamp = self._resolve_ticket(now)
        ctx = SigningContext(url=self.url, ticket=ticket, timestamp=timestamp, nonce=self.nonce)
        return ConfigOutput(
            debug=self.debug,
            app_id=self.credentials.app_id,
            timestamp=timestamp,
            nonce=self.nonce,
            signature=make_signature(ctx),
        )
