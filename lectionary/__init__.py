import logging
import os
from datetime import UTC
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .config import config_by_name

# In-memory storage; counters reset on process restart. For multi-worker
# setups point RATELIMIT_STORAGE_URI at Redis.
limiter = Limiter(key_func=get_remote_address)


def create_app(config_name=None):
    # Load .env so gunicorn (production) picks up env vars too
    from dotenv import load_dotenv

    load_dotenv(Path(__file__).resolve().parent.parent / ".env")

    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)
    config_cls = config_by_name.get(config_name, config_by_name["development"])
    app.config.from_object(config_cls)
    if hasattr(config_cls, "init_app"):
        config_cls.init_app(app)

    _configure_logging(app)

    limiter.init_app(app)

    from .missa.routes import missa_bp

    app.register_blueprint(missa_bp)

    from .errors import register_error_handlers

    register_error_handlers(app)

    from .cli import register_commands

    register_commands(app)

    @app.route("/ping")
    @limiter.exempt
    def ping():
        from datetime import datetime

        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
        }, 200

    @app.route("/health")
    @limiter.exempt
    def health():
        from datetime import datetime

        from .resolver import resolve_day, today

        result = {"timestamp": datetime.now(UTC).isoformat()}

        # Resolve today as a probe of the calendar (and of CALENDAR_TIMEZONE)
        try:
            day = today(app.config.get("CALENDAR_TIMEZONE"))
            resolved = resolve_day(day)
        except Exception:
            app.logger.exception("Health check calendar probe failed.")
            result["calendar"] = {"status": "error", "error": "unavailable"}
        else:
            status = "error" if resolved.tempora_key.startswith("unknown-") else "ok"
            result["calendar"] = {"status": status, "date": day.isoformat(), "tempora_key": resolved.tempora_key}

        calendar_ok = result["calendar"]["status"] == "ok"
        result["status"] = "ok" if calendar_ok else "degraded"
        return result, 200 if calendar_ok else 503

    return app


def _configure_logging(app):
    """Set up file-based logging with rotation for production."""
    if app.debug or app.testing:
        return

    log_dir = Path(app.config["LOG_DIR"])
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / "lectionary.log",
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=5,
    )
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    file_handler.setLevel(logging.INFO)
    # app.logger is the "lectionary" logger, so the calendar modules' loggers propagate here
    app.logger.addHandler(file_handler)
    app.logger.setLevel(logging.INFO)
