import inspect
import logging
import os
import sys
from datetime import datetime
from typing import Any

from loguru import logger
from loguru._logger import Logger

from city_catalog.core.config import settings


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {name}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        base += " ("
        for key, value in extras.items():
            base += f"{key}={value}, "
        base += ")\n"
    else:
        base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {name}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logger(name: str, log_dir: str | None = None) -> Logger:
    today = datetime.now().strftime("%Y-%m-%d")
    log_path = os.path.join(log_dir or settings.LOG_DIR, today, name)
    os.makedirs(log_path, exist_ok=True)

    log_file_debug = os.path.join(log_path, "debug.log")
    log_file_errors = os.path.join(log_path, "error.log")
    log_file_trace = os.path.join(log_path, "trace.log")
    log_file_info = os.path.join(log_path, "info.log")

    logger.remove()  # Remove default handler

    if settings.DEBUG:
        logger.add(
            log_file_trace,
            format=dynamic_formatter,
            level="TRACE",
            rotation="00:00",  # Rotate daily at midnight
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention="3 days",
        )

        logger.add(
            log_file_debug,
            format=dynamic_formatter,
            level="DEBUG",
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention="7 days",
        )

    logger.add(
        log_file_errors,
        format=dynamic_formatter,
        level="ERROR",
        rotation="00:00",
        compression="zip",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        retention="30 days",
    )

    logger.add(
        log_file_info,
        format=dynamic_formatter,
        level="INFO",
        rotation="00:00",
        compression="zip",
        enqueue=True,
        backtrace=True,
        diagnose=True,
    )

    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        colorize=True,
    )

    # Route modules using logging.getLogger through the sinks above
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return logger  # type: ignore
