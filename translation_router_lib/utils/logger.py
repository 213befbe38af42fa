import logging

from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def prepare_logger(
    logger_name: str,
    logger_file_name: Optional[str] = None,
    log_level: Optional[str] = "INFO",
    use_default_config: bool = False,
) -> logging.Logger:
    """
    Return a named logger with a stream handler and, optionally, a file handler.

    Handlers are attached only once per logger name, so endpoints and services
    may call this helper on every construction.

    Parameters
    ----------
    logger_name : str
        Name passed to :func:`logging.getLogger`.
    logger_file_name : str, optional
        When given, records are also appended to this file.
    log_level : str, optional
        Level name (``"DEBUG"``, ``"INFO"``, …). Defaults to ``"INFO"``.
    use_default_config : bool
        Also call :func:`logging.basicConfig` with the same format, so that
        third‑party loggers (werkzeug, urllib3) share it.
    """
    level = logging.getLevelName((log_level or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    if use_default_config:
        logging.basicConfig(format=DEFAULT_LOG_FORMAT, level=level)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    if getattr(logger, "_translation_router_configured", False):
        return logger

    formatter = logging.Formatter(fmt=DEFAULT_LOG_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if logger_file_name:
        file_handler = logging.FileHandler(logger_file_name, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # records are already emitted by our own handlers
    logger.propagate = False
    logger._translation_router_configured = True
    return logger
