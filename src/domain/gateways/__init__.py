"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .home_graph_gateway import IHomeGraphGateway
from .lock_actuator_gateway import ILockActuatorGateway

__all__ = ["IHomeGraphGateway", "ILockActuatorGateway"]
