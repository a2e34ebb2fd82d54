from __future__ import annotations

import os
from typing import Optional

SETTINGS_MODULES = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Settings module for ``env`` (APP_ENV by default); development otherwise."""
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return SETTINGS_MODULES.get(env, "config.development")
