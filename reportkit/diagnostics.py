"""Process-wide diagnostics for uncaught exceptions.

``config()`` installs Rich pretty tracebacks once per process. It is
best-effort: install failures are logged at debug level and never reach the
caller, so it is safe to call from every entry point.
"""

from __future__ import annotations

import logging
import threading

from reportkit.core.settings import Settings, settings_from_env
from reportkit.output.console import install_tracebacks

__all__ = ["config", "is_configured"]

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_installed = False


def config(settings: Settings | None = None) -> None:
    """Install the traceback handler if it is not installed yet.

    Args:
        settings: Traceback options; defaults to environment-derived settings.
    """
    global _installed

    with _lock:
        if _installed:
            return
        effective = settings if settings is not None else settings_from_env()
        try:
            install_tracebacks(
                show_locals=effective.show_locals,
                width=effective.traceback_width,
            )
        except Exception as e:  # noqa: BLE001 - installation is best-effort
            logger.debug("traceback handler not installed: %s", e)
            return
        _installed = True
        logger.debug("traceback handler installed (show_locals=%s)", effective.show_locals)


def is_configured() -> bool:
    """True once ``config()`` has installed the handler."""
    return _installed
