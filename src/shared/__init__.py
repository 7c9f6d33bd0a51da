"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, store backends)
- Configuring structured logging and binding per-request log context
- Serving as a common place for definitions that do not belong
  exclusively to Domain, Application, or Infrastructure

Shared module must not depend on Infrastructure or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumStoreBackend
from .logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumStoreBackend",
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
