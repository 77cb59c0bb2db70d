"""
Logging configuration with optional structured (JSON) output.

The library never installs handlers on import; call
``LoggerFactory.configure`` (or ``DecoderSettings.apply``) to see its logs.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List
import traceback


LIBRARY_LOGGER = 'decoders'

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=repr)


class LoggerFactory:
    """Factory for creating configured loggers."""

    _loggers: Dict[str, logging.Logger] = {}
    _handlers: List[logging.Handler] = []
    _configured = False

    @classmethod
    def configure(
        cls,
        log_level: str = "WARNING",
        enable_console: bool = True,
        enable_file: bool = False,
        enable_structured: bool = False,
        log_dir: str = "logs",
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        """Attach handlers to the library logger. Reconfiguring replaces them."""
        if cls._configured:
            cls.reset()

        level = getattr(logging, log_level.upper())

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            if enable_structured:
                console_handler.setFormatter(StructuredFormatter())
            else:
                console_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                    )
                )
            cls._handlers.append(console_handler)

        if enable_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / "decoders.log",
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            if enable_structured:
                file_handler.setFormatter(StructuredFormatter())
            else:
                file_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
                    )
                )
            cls._handlers.append(file_handler)

        logger = logging.getLogger(LIBRARY_LOGGER)
        logger.setLevel(level)
        for handler in cls._handlers:
            logger.addHandler(handler)

        cls._configured = True

    @classmethod
    def reset(cls):
        """Detach and close every handler added by ``configure``."""
        logger = logging.getLogger(LIBRARY_LOGGER)
        logger.setLevel(logging.NOTSET)
        for handler in cls._handlers:
            logger.removeHandler(handler)
        for handler in cls._handlers:
            handler.close()
        cls._handlers = []
        cls._configured = False

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the given name."""
        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]


# Convenience function
def get_logger(name: str) -> logging.Logger:
    """Get a library logger."""
    return LoggerFactory.get_logger(name)
