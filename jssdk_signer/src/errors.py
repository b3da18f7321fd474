"""Errores del firmador JS-SDK.

Los códigos numéricos se conservan para que los clientes existentes puedan
seguir distinguiendo cada fallo.
"""

from __future__ import annotations

from typing import Any, Optional


class JsSdkError(Exception):
    code: int = 5000
    message: str = "jssdk error"

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        self.message = message or self.message
        if code is not None:
            self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class MissingCredentialsError(JsSdkError):
    code = 5001
    message = "appId or appSecret is not set"


class UpstreamError(JsSdkError):
    """Fallo de transporte o respuesta con error de la API de WeChat."""

    code = 5002
    message = "access_token gets a fail"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[int] = None,
        errcode: Any = None,
        errmsg: Optional[str] = None,
    ):
        super().__init__(message, code)
        self.errcode = errcode
        self.errmsg = errmsg

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.errcode is not None:
            data["errcode"] = self.errcode
            data["errmsg"] = self.errmsg
        return data


class CacheWriteError(JsSdkError):
    code = 5004
    message = "cache is not write"


class CacheDecodeError(JsSdkError):
    # Nunca sale del almacén de caché: se trata como un miss.
    code = 5005
    message = "cache payload cannot be decoded"
