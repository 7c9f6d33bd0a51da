"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration reported by GET /info."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    store_backend: str
    mongo_uri: str
    state_collection: str
    homegraph_url: str
    agent_user_id: str
    lock_vendor_url: str
    lock_id: str
