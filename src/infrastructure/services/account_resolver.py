"""Account resolution for a single-account deployment."""

from __future__ import annotations

from typing import Dict, Optional

from src.shared import get_logger

logger = get_logger(__name__)


class StaticAccountResolver:
    """Maps known access tokens to accounts, falling back to the default account."""

    def __init__(
        self,
        agent_user_id: str,
        token_accounts: Optional[Dict[str, str]] = None,
    ) -> None:
        self._agent_user_id = agent_user_id
        self._token_accounts = dict(token_accounts or {})

    def resolve(self, access_token: Optional[str] = None) -> str:
        if access_token and access_token in self._token_accounts:
            return self._token_accounts[access_token]
        if access_token:
            logger.debug("account.unknown_token_defaulted")
        return self._agent_user_id

    def default_account(self) -> str:
        return self._agent_user_id
