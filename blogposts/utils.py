from typing import Any

from .routes.log_routes import log


class BlogError(Exception):
    """Base for errors that map to an HTTP status."""
    status_code = 500


class ValidationError(BlogError):
    """Missing required field or path/body id mismatch."""
    status_code = 400


class NotFound(BlogError):
    status_code = 404


def err(msg: str, code: int = 400):
    """Log the message as ERROR and return it as a plain text response."""
    log(msg, 'ERROR')
    return msg, code


def parse_bool(value: Any) -> bool:
    """Konvertiert verschiedene Werte zu bool"""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes')
    return False
