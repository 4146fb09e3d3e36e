"""Logger module."""

import logging
import os
import sys

import colorlog

loggers: dict[str, logging.Logger] = {}


def get_logger(
    name: str,
    log_level: str | None = None,
    log_color: bool = False,
) -> logging.Logger:
    """Get a stdout logger, created once per name.

    Args:
        name: The name of the logger.
        log_level: The logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR',
            'CRITICAL'). Falls back to ETHRPC_LOG_LEVEL, then INFO.
        log_color: Whether to use colored output.

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If an invalid log level is provided.
    """
    if name in loggers:
        return loggers[name]

    logger = logging.getLogger(name) if not log_color else colorlog.getLogger(name)

    handler = (
        colorlog.StreamHandler(sys.stdout)
        if log_color
        else logging.StreamHandler(sys.stdout)
    )

    log_levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    log_level = (log_level or os.getenv("ETHRPC_LOG_LEVEL", "INFO")).upper()
    if log_level not in log_levels:
        err_msg = f"Invalid log level: {log_level}"
        raise ValueError(err_msg)

    level = log_levels[log_level]

    logger.setLevel(level)
    handler.setLevel(level)

    if not log_color:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s %(asctime)s - %(name)s - %(levelname)s - %(message)s",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    loggers[name] = logger
    return logger


__all__ = ["get_logger"]
