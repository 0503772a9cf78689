"""
Annuminas logging utilities.

Provides configurable logging for HTTP requests/responses and the credential
exchange. Ensures no sensitive data (passwords, bearer tokens, access-token
secrets) is logged.
"""

import logging
import re
from typing import Any

# Create package-specific loggers
_sdk_logger = logging.getLogger("annuminas")
_http_logger = logging.getLogger("annuminas.http")
_auth_logger = logging.getLogger("annuminas.auth")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"Bearer\s+[A-Za-z0-9\-_.~+/=]+"), "Bearer [REDACTED]"),
    # JWTs appearing anywhere (three base64url segments)
    (re.compile(r"eyJ[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+"), "[JWT_REDACTED]"),
    # Docker Hub personal access tokens
    (re.compile(r"dckr_pat_[A-Za-z0-9\-_]+"), "[PAT_REDACTED]"),
    # Secret/token patterns in JSON-ish or key=value text
    (
        re.compile(
            r"(secret|token|access_token|password)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]",
            re.IGNORECASE,
        ),
        r"\1: [REDACTED]",
    ),
]

_DEFAULT_SENSITIVE_KEYS = {
    "authorization",
    "password",
    "secret",
    "token",
    "access_token",
}

# Number of leading characters of a token kept for correlation
_TOKEN_PREVIEW_LENGTH = 6


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    auth_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure Annuminas logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        auth_level: Log level for the credential exchange (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from annuminas.logging import configure_logging

        # Enable debug logging for HTTP requests
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _auth_logger.setLevel(auth_level if auth_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get an Annuminas logger.

    Args:
        name: Logger name suffix (e.g., "http", "auth"). If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"annuminas.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with bearer tokens, JWTs, access tokens and secrets masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def truncate_token(token: str) -> str:
    """
    Shorten a token for safe logging.

    Only a short prefix survives, enough to tell two tokens apart.
    """
    if len(token) <= _TOKEN_PREVIEW_LENGTH * 2:
        return "[REDACTED]"

    return f"{token[:_TOKEN_PREVIEW_LENGTH]}..."


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, password,
            secret, token, access_token)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        # token_label is a display name, not a secret
        if key_lower in sensitive_keys or (
            any(sk in key_lower for sk in sensitive_keys) and not key_lower.endswith("_label")
        ):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: Any = None,
) -> None:
    """Log an HTTP request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    if isinstance(body, dict) and body:
        log_parts.append(f"body={safe_log_dict(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    body: Any = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log an HTTP response at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if isinstance(body, dict) and body:
        log_parts.append(f"body={safe_log_dict(body)}")
    elif isinstance(body, str) and body:
        log_parts.append(f"body={mask_sensitive_data(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_auth_operation(operation: str, username: str, endpoint: str) -> None:
    """
    Log a credential-exchange step at DEBUG level.

    Args:
        operation: Step name (e.g., "authenticate", "cached")
        username: Account identifier (never the secret)
        endpoint: Authentication endpoint path
    """
    if not _auth_logger.isEnabledFor(logging.DEBUG):
        return

    _auth_logger.debug(f"{operation}: username={username}, endpoint={endpoint}")


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "truncate_token",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_auth_operation",
]
