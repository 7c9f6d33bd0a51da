"""Infrastructure services package."""

from .account_resolver import StaticAccountResolver
from .actuation_dispatcher import BackgroundActuationDispatcher
from .health_check_service import HealthCheckService
from .state_change_bus import InProcessStateChangeBus
from .static_device_catalog import StaticDeviceCatalog

__all__ = [
    "BackgroundActuationDispatcher",
    "HealthCheckService",
    "InProcessStateChangeBus",
    "StaticAccountResolver",
    "StaticDeviceCatalog",
]
