"""
Bulk status toggling.
"""

import logging

from .user_store import UserStore


logger = logging.getLogger(__name__)


class StatusToggleService:
    """Flips ``active``/``inactive`` on every user."""

    @classmethod
    async def toggle_all(cls) -> None:
        # Single store-side UPDATE; no rows are read into memory.
        affected = await UserStore.toggle_statuses()
        logger.info("Toggled status of %s users", affected)
