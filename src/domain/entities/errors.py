"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
Errors that can be reported to the smart home platform per device carry the
platform ``error_code`` the fulfillment response should use.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    error_code: str = "hardError"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeviceNotFoundError(DomainError):
    """Raised when a device has no catalog entry or no state record."""

    error_code = "deviceNotFound"

    def __init__(self, device_id: str, details: Optional[Dict[str, Any]] = None):
        self.device_id = device_id
        super().__init__(f"Device with ID {device_id} not found", details)


class UnsupportedCommandError(DomainError):
    """Raised when a command type has no trait mapping."""

    error_code = "functionNotSupported"

    def __init__(self, command: str, details: Optional[Dict[str, Any]] = None):
        self.command = command
        super().__init__(f"Command {command} is not supported", details)


class InvalidCommandParamsError(DomainError):
    """Raised when a supported command carries unusable parameters."""

    error_code = "notSupported"


class StoreWriteError(DomainError):
    """Raised when the device state store fails to commit a write."""

    error_code = "hardError"


class ActuatorError(DomainError):
    """Raised when the downstream lock vendor call fails or times out."""

    error_code = "transientError"


class PlatformIngestionError(DomainError):
    """Raised when a HomeGraph request-sync or report-state call fails."""

    error_code = "transientError"


class UnsupportedIntentError(DomainError):
    """Raised when a fulfillment request carries an unknown intent."""

    error_code = "notSupported"

    def __init__(self, intent: str, details: Optional[Dict[str, Any]] = None):
        self.intent = intent
        super().__init__(f"Intent {intent} is not supported", details)
