"""Structured logging, request-line logging and optional error monitoring."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from flask import request

access_logger = logging.getLogger('roster.access')


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(structured: bool = True) -> None:
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    if not root.handlers:
        root.addHandler(logging.StreamHandler())
    if structured:
        for handler in root.handlers:
            handler.setFormatter(JsonFormatter())


def configure_error_monitoring(dsn: str) -> None:
    if not dsn:
        return
    try:
        import sentry_sdk
        sentry_sdk.init(dsn=dsn, traces_sample_rate=0.0)
    except Exception:
        logging.getLogger(__name__).warning('Sentry SDK not available; DSN configured but monitoring disabled.')


def format_request_line(response) -> str:
    """Common log format line for the current request."""
    size = response.calculate_content_length()
    return '{addr} - - "{method} {path} {protocol}" {status} {size}'.format(
        addr=request.remote_addr or '-',
        method=request.method,
        path=request.full_path.rstrip('?'),
        protocol=request.environ.get('SERVER_PROTOCOL', 'HTTP/1.1'),
        status=response.status_code,
        size='-' if size is None else size,
    )


def register_request_logging(app) -> None:
    @app.after_request
    def log_request_line(response):
        access_logger.info(format_request_line(response))
        return response
