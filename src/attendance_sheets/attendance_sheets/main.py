from __future__ import annotations

import importlib
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .leave.controller import register as register_leave
from .store.repository import RecordStore
from .system.controller import register as register_system
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "TOKEN_SECRET",
    "TOKEN_TTL_SECONDS",
    "SHEETS_CONFIG",
    "PORT",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "WRITE_POLICY",
    "LOAD_ASYNC",
    "SERVE_WHILE_LOADING",
)


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    settings_module = get_settings_module((overrides or {}).get("APP_ENV"))
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in SETTING_NAMES if hasattr(module, name)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(overrides: Optional[Dict[str, Any]] = None, *, store: Optional[RecordStore] = None) -> Flask:
    """Application factory.

    ``store`` replaces the gspread-backed store (tests pass an in-memory one).
    The mirror starts loading here; with LOAD_ASYNC the app is returned before
    the load finishes and /api requests get 503 until it does.
    """
    load_dotenv(override=False)
    settings = load_settings(overrides)
    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["SERVE_WHILE_LOADING"] = bool(settings.get("SERVE_WHILE_LOADING", False))
    app.config["PORT"] = int(settings.get("PORT", 3000))

    sheets_config = settings["SHEETS_CONFIG"]
    logger.info(
        "settings=%s spreadsheet=%s write_policy=%s",
        settings["SETTINGS_MODULE"],
        sheets_config.get("spreadsheet_id") or "<unset>",
        settings.get("WRITE_POLICY", "mirror_first"),
    )

    container = build_container(
        sheets_config=sheets_config,
        token_secret=settings["TOKEN_SECRET"],
        token_ttl_seconds=int(settings.get("TOKEN_TTL_SECONDS", 3600)),
        write_policy=settings.get("WRITE_POLICY", "mirror_first"),
        store=store,
    )
    app.extensions["attendance_sheets"] = container

    register_system(app, container)
    register_users(app, container)
    register_attendance(app, container)
    register_leave(app, container)

    if settings.get("LOAD_ASYNC", True):
        container.loader.start()
    else:
        container.loader.reload()

    return app


def run() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    run()
