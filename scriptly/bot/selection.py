"""Short-lived storage for text awaiting a conversion choice.

Telegram limits callback data to 64 bytes, so the selected text is parked
here under a short token and the inline buttons carry only the token.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from uuid import uuid4

from ..config.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class Selection:
    """Text a user sent, waiting for a button press."""

    user_id: int
    text: str
    created_at: float = field(default_factory=time.time)


class SelectionStore:
    """Keeps selections per token with a TTL and a single owner."""

    def __init__(self, ttl_seconds: int | None = None):
        self.ttl_seconds = settings.selection_ttl_seconds if ttl_seconds is None else ttl_seconds
        self.selections: Dict[str, Selection] = {}

    def create(self, user_id: int, text: str) -> str:
        self._cleanup_expired()
        token = uuid4().hex[:12]
        self.selections[token] = Selection(user_id=user_id, text=text)
        logger.debug("Stored selection %s for user %d (%d chars)", token, user_id, len(text))
        return token

    def get(self, token: str, user_id: int) -> Tuple[Optional[Selection], Optional[str]]:
        """Return ``(selection, None)`` or ``(None, "not_found" | "forbidden")``."""
        self._cleanup_expired()
        selection = self.selections.get(token)
        if selection is None:
            return None, "not_found"
        if selection.user_id != user_id:
            logger.warning("User %d tried to use selection of user %d", user_id, selection.user_id)
            return None, "forbidden"
        return selection, None

    def _cleanup_expired(self) -> None:
        now = time.time()
        expired = [
            token
            for token, selection in self.selections.items()
            if now - selection.created_at > self.ttl_seconds
        ]
        for token in expired:
            del self.selections[token]
        if expired:
            logger.debug("Dropped %d expired selections", len(expired))


# Global selection store instance
selection_store = SelectionStore()
