"""Algoritmo de firma del JS-SDK de WeChat.

La cadena canónica se arma con las claves ordenadas por código ASCII
(``jsapi_ticket``, ``noncestr``, ``timestamp``, ``url``) y los valores sin
escapar; la firma es el SHA-1 en hexadecimal minúscula.
"""

from __future__ import annotations

import hashlib
from typing import Dict

from .models import SigningContext


def build_signing_params(ctx: SigningContext) -> Dict[str, str]:
    return {
        "url": ctx.url,
        "jsapi_ticket": ctx.ticket,
        "timestamp": str(ctx.timestamp),
        "noncestr": ctx.nonce,
    }


def canonical_string(params: Dict[str, str]) -> str:
    ordered = sorted(params.items(), key=lambda kv: kv[0].encode("utf-8"))
    return "&".join(f"{k}={v}" for k, v in ordered)


def make_signature(ctx: SigningContext) -> str:
    raw = canonical_string(build_signing_params(ctx))
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()
