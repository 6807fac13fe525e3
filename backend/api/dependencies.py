"""
Shared dependencies for the color conversion API.
Logging, configuration and the rate limiter used by main.py and the routers.
"""
import os
import logging
import logging.handlers
import traceback

from fastapi import HTTPException
from slowapi import Limiter
from slowapi.util import get_remote_address

# ── Structured JSON Logging setup ───────────────────────────────
import json as _json
from datetime import datetime as _dt, timezone as _tz

class _JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": _dt.fromtimestamp(record.created, tz=_tz.utc).strftime('%Y-%m-%dT%H:%M:%S.') + f"{int(record.msecs):03d}Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return _json.dumps(entry, ensure_ascii=False)

_logger = logging.getLogger('colorsapi')
# Log level configurable via ENV
_log_level_str = os.environ.get('COLORS_LOG_LEVEL', 'INFO').upper()
_log_level = getattr(logging, _log_level_str, logging.INFO)
_logger.setLevel(_log_level)

# Empty COLORS_LOG_FILE disables the file handler
_log_file = os.environ.get('COLORS_LOG_FILE', '/tmp/colors-api.log')
if _log_file:
    _handler = logging.handlers.RotatingFileHandler(
        _log_file, maxBytes=10 * 1024 * 1024, backupCount=3
    )
    _handler.setFormatter(_JsonFormatter())
    _logger.addHandler(_handler)
_stderr_handler = logging.StreamHandler()
_stderr_handler.setFormatter(_JsonFormatter())
_logger.addHandler(_stderr_handler)

# Reported at startup
COLORS_LOG_FILE = _log_file or None

# ── Limits ───────────────────────────────────────────────────────
MAX_BATCH = int(os.environ.get('COLORS_MAX_BATCH', '1024'))
BATCH_RATE_LIMIT = os.environ.get('COLORS_BATCH_RATE_LIMIT', '60/minute')

# ── Rate Limiter ─────────────────────────────────────────────────
limiter = Limiter(key_func=get_remote_address)


def _sanitize_500(e: Exception, context: str = '') -> HTTPException:
    """Log full exception, return sanitized 500."""
    _logger.error(
        "500 error context=%s type=%s msg=%s trace=%s",
        context, type(e).__name__, str(e),
        traceback.format_exc().splitlines()[-1],
    )
    return HTTPException(
        status_code=500,
        detail="Internal server error. Please try again.",
    )
