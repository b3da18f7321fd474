"""Endpoint que expone la configuración firmada del JS-SDK de WeChat.

La URL de la página se resuelve aquí, a partir del request, y se entrega al
servicio como texto plano.
"""

import logging

from flask import Blueprint, jsonify, request

from ..src.errors import CacheWriteError, JsSdkError, MissingCredentialsError, UpstreamError
from ..src.services.jssdk_service import JsSdkSigner
from ..src.utils import strip_fragment


bp = Blueprint("jssdk", __name__)
logger = logging.getLogger(__name__)


def _page_url() -> str:
    # El endpoint se llama por XHR desde la página a firmar: sin ?url= se usa el Referer.
    url = (request.args.get("url") or request.referrer or "").strip()
    if not url:
        raise ValueError("url is required (query ?url= or Referer header)")
    return strip_fragment(url)


@bp.get("/config")
def jssdk_config():
    """Devuelve { debug, appId, timestamp, nonceStr, signature } para wx.config.

    Query: url? (por defecto, el Referer de la página que hace la llamada)
    """
    try:
        signer = JsSdkSigner.from_config(_page_url())
        return jsonify(signer.get_config().to_dict()), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except UpstreamError as e:
        logger.warning("JS-SDK config failed upstream: %s (code %s)", e.message, e.code)
        return jsonify(e.to_dict()), 502
    except (MissingCredentialsError, CacheWriteError) as e:
        logger.error("JS-SDK config failed: %s (code %s)", e.message, e.code)
        return jsonify(e.to_dict()), 500
    except JsSdkError as e:
        return jsonify(e.to_dict()), 500
