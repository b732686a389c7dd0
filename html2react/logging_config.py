from __future__ import annotations

"""Central logging configuration for html2react.

Import and call :func:`setup_logging` at application start-up.
"""

import logging
import logging.config
import os

from html2react.config import ConfigManager

__all__ = ["setup_logging"]


def setup_logging(level: int | None = None) -> None:
    """Configure logging using the ``logging.yml`` configuration section.

    *level*, when given, overrides the console handler level (``--verbose``).
    """
    log_dir = os.environ.get("HTML2REACT_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "html2react.log")

    try:
        logging_config = ConfigManager().get_logging_config()

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            # Update the filename dynamically
            if "handlers" in logging_config and "file" in logging_config["handlers"]:
                logging_config["handlers"]["file"]["filename"] = log_file
            if level is not None and "console" in logging_config.get("handlers", {}):
                logging_config["handlers"]["console"]["level"] = logging.getLevelName(level)

            logging.config.dictConfig(logging_config)
            logging.debug("===== Logging initialised from config files =====")
        else:
            _setup_minimal_logging(level)
    except (ValueError, TypeError, AttributeError, ImportError, OSError) as exc:
        # dictConfig reports bad sections through these
        print(f"Error loading logging config: {exc}")
        _setup_minimal_logging(level)

    _apply_debug_overrides()


def _setup_minimal_logging(level: int | None = None) -> None:
    """Set up minimal console-only logging when config is unavailable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': logging.getLevelName(level) if level is not None else 'INFO',
            },
        },
        'root': {
            'level': 'DEBUG',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.debug("===== Logging initialised with minimal fallback =====")


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    Supports:
    - HTML2REACT_DEBUG_MODULES=comma,separated,logger,names -> DEBUG for listed loggers
    """
    extra_modules = os.environ.get('HTML2REACT_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(
            h.level == logging.NOTSET or h.level <= logging.DEBUG for h in logger.handlers
        )
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
