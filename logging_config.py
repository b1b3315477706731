# logging_config.py
"""Logging configuration for the API process."""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Optional


def setup_logging(level: Optional[str] = None, format_type: Optional[str] = None) -> None:
     """
     Configure the root logger with a single stdout handler.

     Args:
          level: Log level name; defaults to ``LOG_LEVEL`` or INFO.
          format_type: "standard" or "json"; defaults to ``LOG_FORMAT`` or standard.
     """
     level = level or os.getenv("LOG_LEVEL", "INFO")
     format_type = format_type or os.getenv("LOG_FORMAT", "standard")
     log_level = getattr(logging, level.upper(), logging.INFO)

     if format_type == "json":
          formatter = JsonFormatter()
     else:
          formatter = logging.Formatter(
               fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
               datefmt="%Y-%m-%d %H:%M:%S",
          )

     root_logger = logging.getLogger()
     root_logger.setLevel(log_level)
     for handler in root_logger.handlers[:]:
          root_logger.removeHandler(handler)

     console_handler = logging.StreamHandler(sys.stdout)
     console_handler.setLevel(log_level)
     console_handler.setFormatter(formatter)
     root_logger.addHandler(console_handler)

     # Reduce noise from external libraries
     logging.getLogger("azure").setLevel(logging.WARNING)
     logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
     """One JSON object per log line."""

     def format(self, record: logging.LogRecord) -> str:
          log_data: dict[str, Any] = {
               "timestamp": datetime.now(timezone.utc).isoformat(),
               "level": record.levelname,
               "logger": record.name,
               "message": record.getMessage(),
          }
          if record.exc_info:
               log_data["exception"] = self.formatException(record.exc_info)
          return json.dumps(log_data)
