"""Centralized logging configuration."""
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_type: str = "json",
    enabled: bool = True,
    console: bool = False,
) -> None:
    """Configure application logging.

    The full-screen UI owns stdout, so console output goes to stderr and is
    off unless explicitly requested.
    """

    if not enabled:
        # Disable all logging completely
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    handlers: List[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    # Configure root logger
    logging.basicConfig(
        level=numeric_level,
        handlers=handlers,
        force=True  # Override existing configuration
    )


class JsonFormatter(logging.Formatter):
    """Format logs as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        if hasattr(record, "refresh_id"):
            log_data["refresh_id"] = record.refresh_id

        return json.dumps(log_data)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
