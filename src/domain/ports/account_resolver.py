"""Domain port mapping callers to smart home accounts."""

from __future__ import annotations

from typing import Optional, Protocol


class IAccountResolver(Protocol):
    """Resolves the agent user id that owns the caller's devices."""

    def resolve(self, access_token: Optional[str] = None) -> str:
        ...

    def default_account(self) -> str:
        """Account used by flows without a caller (state reports, request sync)."""
        ...
