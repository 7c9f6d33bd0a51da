"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of data persistence.
"""

from .in_memory_device_state_repository import InMemoryDeviceStateRepository
from .mongo_device_state_repository import MongoDeviceStateRepository

__all__ = ["InMemoryDeviceStateRepository", "MongoDeviceStateRepository"]
