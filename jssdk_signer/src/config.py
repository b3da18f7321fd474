import os
from dotenv import load_dotenv


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    load_dotenv()

    DEBUG = _flag("DEBUG", "false")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Credenciales de la cuenta oficial de WeChat
    WECHAT_APP_ID = os.getenv("WECHAT_APP_ID")
    WECHAT_APP_SECRET = os.getenv("WECHAT_APP_SECRET")

    # Caché en disco del par access_token/jsapi_ticket (vacío = junto al módulo)
    WECHAT_USE_CACHE = _flag("WECHAT_USE_CACHE", "true")
    WECHAT_CACHE_PATH = os.getenv("WECHAT_CACHE_PATH", "")

    # Llamadas a api.weixin.qq.com
    WECHAT_VERIFY_TLS = _flag("WECHAT_VERIFY_TLS", "true")
    WECHAT_HTTP_TIMEOUT = float(os.getenv("WECHAT_HTTP_TIMEOUT", "500"))

    # Valor de `debug` que se devuelve en la configuración del JS-SDK
    WECHAT_JSSDK_DEBUG = _flag("WECHAT_JSSDK_DEBUG", "false")
