import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "ARBOR_LOG_DIR"
DEFAULT_LOG_SUBDIR = Path(".arbor") / "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers handed out by get_logger, so file output can be switched on later.
_loggers: dict[str, logging.Logger] = {}
_file_logging_enabled = False


def _resolve_log_directory() -> Path:
    """Return the directory where log files should be written."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def _sanitize_logger_name(name: str) -> str:
    """Convert a logger name to a filesystem-friendly filename."""

    sanitized = name.replace("/", "_").replace(os.sep, "_")
    sanitized = sanitized.replace("..", ".")
    return sanitized.replace(".", "_") or "root"


def _add_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(logger.level)
    logger.addHandler(handler)


def _add_file_handler(logger: logging.Logger) -> None:
    if any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers):
        return
    log_filename = _resolve_log_directory() / f"{_sanitize_logger_name(logger.name)}.log"
    _add_handler(
        logger,
        RotatingFileHandler(
            log_filename,
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        ),
    )


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    if logger.handlers:
        # Configured by an earlier call or by the host application.
        return

    _add_handler(logger, logging.StreamHandler())
    if _file_logging_enabled:
        _add_file_handler(logger)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a stream handler, plus a rolling file once enabled."""

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    _loggers[name] = logger
    return logger


def enable_file_logging() -> None:
    """Write every arbor logger, existing and future, to a rolling file.

    Files go to ``$ARBOR_LOG_DIR`` or ``~/.arbor/logs``.
    """

    global _file_logging_enabled
    _file_logging_enabled = True
    for logger in _loggers.values():
        _add_file_handler(logger)


def disable_file_logging() -> None:
    global _file_logging_enabled
    _file_logging_enabled = False
    for logger in _loggers.values():
        for handler in list(logger.handlers):
            if isinstance(handler, RotatingFileHandler):
                logger.removeHandler(handler)
                handler.close()
