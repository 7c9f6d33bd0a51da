"""
Domain Layer Package

This package contains the core rules of the lock bridge: the device and
trait state model, command mapping and the ports the application layer
depends on, without dependencies on external frameworks or infrastructure.
"""

# Re-export submodules
from src.domain import entities, gateways, ports, repositories, services

__all__ = ["entities", "gateways", "repositories", "services", "ports"]
