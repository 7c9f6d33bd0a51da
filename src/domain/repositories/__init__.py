"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .device_state_repository import IDeviceStateRepository

__all__ = ["IDeviceStateRepository"]
