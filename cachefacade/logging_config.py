"""Logging setup for applications embedding the cache facade."""

import sys
import uuid
import json
import logging
from datetime import datetime, timezone
from typing import Optional

from cachefacade.config import get_log_config

PLAIN_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


class CorrelationFilter(logging.Filter):
    def __init__(self, correlation_id: str = None):
        super().__init__()
        self.correlation_id = correlation_id or str(uuid.uuid4())[:8]

    def filter(self, record):
        record.correlation_id = self.correlation_id
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'correlation_id': getattr(record, 'correlation_id', 'N/A'),
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class _FacadeHandler(logging.StreamHandler):
    """Marks handlers installed by setup_logging so a second call can replace them."""


def setup_logging(level: Optional[str] = None, json_format: Optional[bool] = None,
                  correlation_id: str = None, stream=None) -> logging.Logger:
    config = get_log_config()
    level = (level or config.level).upper()
    if json_format is None:
        json_format = config.json_format

    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _FacadeHandler)]:
        root.removeHandler(handler)

    handler = _FacadeHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    handler.addFilter(CorrelationFilter(correlation_id))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level))
    return root
