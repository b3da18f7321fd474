"""Cliente HTTP para obtener access_token y jsapi_ticket de WeChat.

Sin estado y sin reintentos: una sola petición por llamada.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Dict, Optional

import requests
import urllib3

from ..errors import UpstreamError

logger = logging.getLogger(__name__)

TOKEN_CODE = 5002
TICKET_CODE = 5003


class WeChatClient:
    API_BASE = "https://api.weixin.qq.com/cgi-bin"
    DEFAULT_TIMEOUT = 500

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify_tls: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.session = session or requests.Session()
        if not verify_tls:
            logger.warning(
                "TLS certificate verification is DISABLED for %s (legacy compatibility mode)",
                self.API_BASE,
            )

    def _get_json(self, route: str, params: Dict[str, Any], code: int, label: str) -> Dict[str, Any]:
        try:
            with warnings.catch_warnings():
                if not self.verify_tls:
                    warnings.simplefilter("ignore", urllib3.exceptions.InsecureRequestWarning)
                resp = self.session.get(
                    f"{self.API_BASE}/{route}",
                    params=params,
                    timeout=self.timeout,
                    verify=self.verify_tls,
                )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            raise UpstreamError(f"{label} gets a fail", code=code) from exc
        except ValueError as exc:
            raise UpstreamError(f"{label} gets a fail", code=code) from exc
        if not isinstance(data, dict):
            raise UpstreamError(f"{label} gets a fail", code=code)
        return data

    def fetch_access_token(self, app_id: str, app_secret: str) -> str:
        data = self._get_json(
            "token",
            {"grant_type": "client_credential", "appid": app_id, "secret": app_secret},
            TOKEN_CODE,
            "access_token",
        )
        if "errcode" in data:
            logger.warning("WeChat token endpoint returned errcode=%s", data.get("errcode"))
            raise UpstreamError(
                "access_token gets a fail", code=TOKEN_CODE,
                errcode=data.get("errcode"), errmsg=data.get("errmsg"),
            )
        token = data.get("access_token")
        if not token:
            raise UpstreamError("access_token gets a fail", code=TOKEN_CODE)
        logger.info("Fetched access_token for appid=%s", app_id)
        return token

    def fetch_ticket(self, access_token: str) -> str:
        data = self._get_json(
            "ticket/getticket",
            {"access_token": access_token, "type": "jsapi"},
            TICKET_CODE,
            "jsapi_ticket",
        )
        errcode = data.get("errcode")
        if errcode is not None and not _is_zero(errcode):
            logger.warning("WeChat ticket endpoint returned errcode=%s", errcode)
            raise UpstreamError(
                "jsapi_ticket gets a fail", code=TICKET_CODE,
                errcode=errcode, errmsg=data.get("errmsg"),
            )
        ticket = data.get("ticket")
        if not ticket:
            raise UpstreamError("jsapi_ticket gets a fail", code=TICKET_CODE)
        logger.info("Fetched jsapi_ticket")
        return ticket


def _is_zero(errcode: Any) -> bool:
    try:
        return int(errcode) == 0
    except (TypeError, ValueError):
        return False
