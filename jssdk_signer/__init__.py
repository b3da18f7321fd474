from flask import Flask, jsonify, request, g
from flask_cors import CORS
import time
import logging

from .src.config import Config
from .routes.health import bp as health_bp
from .routes.jssdk import bp as jssdk_bp


def create_app():
    app = Flask(__name__)
    app.config.from_object(Config)

    origins = Config.CORS_ORIGINS if hasattr(Config, 'CORS_ORIGINS') else '*'
    CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)

    app.register_blueprint(health_bp)
    app.register_blueprint(jssdk_bp, url_prefix="/jssdk")

    # Logging simple de todas las peticiones entrantes
    logging.basicConfig(level=logging.DEBUG if getattr(Config, 'DEBUG', False) else logging.INFO)

    @app.before_request
    def _log_start():
        g._start_time = time.time()

    @app.after_request
    def _log_request(resp):
        started = getattr(g, '_start_time', None)
        dur_ms = int((time.time() - started) * 1000) if started else -1
        logging.info(
            "%s %s -> %s (%d ms) ip=%s",
            request.method,
            request.path,
            resp.status_code,
            dur_ms,
            request.headers.get('X-Forwarded-For', request.remote_addr),
        )
        return resp

    @app.get("/")
    def root():
        return jsonify({"name": "jssdk_signer", "status": "ok"}), 200

    return app
