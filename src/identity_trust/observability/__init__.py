"""Observability helpers for identity trust.

Structured logging via structlog, with JSON output for production and
colored console output for development. Nothing is configured on import.

Example:
    >>> from identity_trust.observability import configure_logging
    >>>
    >>> configure_logging(log_format="console", log_level="DEBUG")
"""

from identity_trust.observability.logging import configure_logging

__all__ = ["configure_logging"]
