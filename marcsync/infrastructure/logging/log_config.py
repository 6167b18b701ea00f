"""Centralized logging configuration.

Applies per-category log levels from Settings so that the noisy httpx and
httpcore loggers can be silenced without hiding the client's own messages.

The library itself never configures logging; applications opt in with:

    from marcsync.infrastructure.logging.log_config import setup_logging
    setup_logging()
"""

import logging
import sys

from marcsync.config import Settings, get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level": [
        "marcsync",
    ],
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
}


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from client settings."""
    settings = settings or get_settings()

    # Ensure at least one handler exists (applications usually add one,
    # but scripts and REPL sessions may not).
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — marcsync=%s, http=%s",
        settings.log_level,
        settings.log_level_http,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
