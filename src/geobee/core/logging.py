"""
Logging configuration.

We use a YAML logging config (`src/geobee/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `GEOBEE_LOG_LEVEL`). The library itself
never calls this on import; applications opt in.
"""

from __future__ import annotations

import logging.config

from geobee.config.settings import get_logging_config, get_settings


def configure_logging() -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    settings = get_settings()
    # Copy: the cached dict is shared and dictConfig must not see earlier edits.
    config = dict(get_logging_config())

    level = settings.app.log_level.upper()
    config["root"] = {**config.get("root", {}), "level": level}
    config["handlers"] = {
        name: ({**handler, "level": level} if isinstance(handler, dict) and "level" in handler else handler)
        for name, handler in config.get("handlers", {}).items()
    }

    logging.config.dictConfig(config)
