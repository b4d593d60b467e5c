# e2e/utils/logging_config.py

import json
import logging
import sys
from datetime import datetime


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""

    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
        }

        # Tag records by the layer that produced them
        if record.name.startswith("page_objects"):
            log_record["service"] = "page-objects"
        elif record.name.startswith(("fixtures", "utils.browser_factory")):
            log_record["service"] = "runner"
        elif record.name.startswith("selenium"):
            log_record["service"] = "selenium"
        else:
            log_record["service"] = "e2e"

        # logger.info("message", extra={"extra_context": {"url": url}})
        if hasattr(record, "extra_context") and isinstance(record.extra_context, dict):
            log_record.update(record.extra_context)

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_record, default=str)


def setup_logging(level: str = "INFO"):
    """Configures the root logger with a JSON formatter."""
    root_logger = logging.getLogger()
    level = level.upper()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicate logs
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(JsonFormatter())
    root_logger.addHandler(console_handler)

    # Selenium logs every wire command at DEBUG
    logging.getLogger("selenium").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("WDM").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging configured with JSON format.")
