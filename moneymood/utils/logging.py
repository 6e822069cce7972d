"""Centralized logging configuration."""
import logging
import sys
from pathlib import Path
from typing import Optional, Union
import json
from datetime import datetime, timezone


# Extra attributes copied into JSON output when present on a record
EXTRA_FIELDS = (
    "correlation_id",
    "currency",
    "source",
    "function",
    "execution_time_ms",
    "error",
)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_type: str = "json",
    enabled: bool = True
) -> None:
    """Configure application logging."""
    
    if not enabled:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    
    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    
    handlers = [console_handler]
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    
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
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)
        
        return json.dumps(log_data, default=str)


def get_logger(
    name: str, correlation_id: Optional[str] = None
) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a logger, optionally tagging its records with a correlation ID."""
    logger = logging.getLogger(name)
    
    if correlation_id:
        return logging.LoggerAdapter(logger, {"correlation_id": correlation_id})
    
    return logger
