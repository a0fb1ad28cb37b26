"""
Logging service

Structured logging built on loguru
"""
import sys
from pathlib import Path
from typing import Any

from loguru import logger


class LoggerService:
    """
    Logging service

    Usage:
        from hdr_pipeline.core.logger import get_logger

        logger = get_logger(__name__)
        logger.info("stage started")
        logger.bind(stage="Crop").error("tool failed")
    """

    _configured: bool = False

    @classmethod
    def configure(
        cls,
        level: str = "INFO",
        log_dir: str = "./logs",
        log_format: str | None = None,
        file_enabled: bool = True,
        rotation: str = "10 MB",
        retention: str = "7 days",
    ) -> None:
        """
        Configure the loguru sinks

        Args:
            level: log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: directory for log files
            log_format: log format (None uses the default)
            file_enabled: also write log files
            rotation: log file rotation size
            retention: how long rotated files are kept
        """
        if cls._configured:
            return

        # drop the default handler
        logger.remove()

        if log_format is None:
            log_format = (
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{extra[name]}</cyan> | "
                "<level>{message}</level>"
            )

        logger.configure(extra={"name": "hdr_pipeline"})

        # console
        logger.add(
            sys.stderr,
            format=log_format,
            level=level,
            colorize=True,
        )

        if file_enabled:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            logger.add(
                log_path / "pipeline.log",
                format=log_format,
                level=level,
                rotation=rotation,
                retention=retention,
                compression="zip",
                encoding="utf-8",
            )

            # errors only
            logger.add(
                log_path / "error.log",
                format=log_format,
                level="ERROR",
                rotation=rotation,
                retention=retention,
                compression="zip",
                encoding="utf-8",
            )

        cls._configured = True

    @classmethod
    def reset(cls) -> None:
        """Reset configuration (for tests)"""
        logger.remove()
        cls._configured = False


def get_logger(name: str) -> Any:
    """
    Return a logger bound to a component name

    Args:
        name: component name (usually __name__ or the class name)

    Returns:
        bound loguru logger
    """
    return logger.bind(name=name)


def setup_logger_from_config(level: str | None = None) -> None:
    """
    Initialize logging from the settings file

    Args:
        level: overrides logging.level when given
    """
    try:
        from hdr_pipeline.core.config import get_config

        config = get_config()
        logging_config = config.get_section("logging")
    except Exception:
        # settings unavailable, fall back to defaults
        logging_config = {}

    LoggerService.configure(
        level=level or logging_config.get("level", "INFO"),
        log_dir=logging_config.get("log_dir", "./logs"),
        log_format=logging_config.get("format"),
        file_enabled=logging_config.get("file", {}).get("enabled", True),
        rotation=logging_config.get("file", {}).get("rotation", "10 MB"),
        retention=logging_config.get("file", {}).get("retention", "7 days"),
    )
