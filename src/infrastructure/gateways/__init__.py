"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of external service communications.
"""

from .home_graph_gateway import HomeGraphGateway
from .little_bird_lock_gateway import LittleBirdLockGateway

__all__ = ["HomeGraphGateway", "LittleBirdLockGateway"]
