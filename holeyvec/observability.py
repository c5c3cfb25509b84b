import json
import logging
from typing import Optional

from .config import Settings

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
}

logger = logging.getLogger("holeyvec")

_handler: Optional[logging.Handler] = None


class JSONFormatter(logging.Formatter):
    """Simple JSON log formatter including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                data[key] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=repr)


PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> logging.Handler:
    """Attach a stream handler to the ``holeyvec`` logger.

    Replaces a handler installed by an earlier call, so calling it twice does
    not duplicate output.  Records stop propagating to the root logger while
    the handler is installed.  Returns the installed handler.
    """
    global _handler
    if settings is None:
        settings = Settings.from_env()
    handler = logging.StreamHandler()
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.propagate = False
    _handler = handler
    logger.setLevel(settings.level)
    return handler


__all__ = ["JSONFormatter", "configure_logging", "logger", "PLAIN_FORMAT"]
