"""Fire-once user sync trigger.

Watches the identity session and, the first time a signed-in identity is
observed, asks the API to mirror it into the local user store. The call
runs in the background and never blocks the caller.

Usage:
    session = IdentitySession()
    async with httpx.AsyncClient(base_url=API_URL, cookies=cookies) as client:
        trigger = UserSyncTrigger(session, client)
        session.load(Identity(external_id="user_2abc"))
        trigger.observe()  # dispatches POST /api/auth/sync-user
        trigger.observe()  # no-op while in flight or once synced
"""

import asyncio
import logging
from enum import Enum

import httpx

from prep.client.session import IdentitySession

logger = logging.getLogger(__name__)

SYNC_USER_PATH = "/api/auth/sync-user"


class SyncState(str, Enum):
    """Sync attempt state of one trigger."""

    NOT_ATTEMPTED = "not_attempted"
    IN_FLIGHT = "in_flight"
    DONE = "done"


class UserSyncTrigger:
    """Dispatches at most one successful sync per trigger lifetime.

    A failed attempt puts the trigger back to NOT_ATTEMPTED, so the next
    observation retries. There is no timer and no backoff.
    """

    def __init__(
        self,
        session: IdentitySession,
        http_client: httpx.AsyncClient,
        endpoint: str = SYNC_USER_PATH,
    ) -> None:
        """Initialize sync trigger.

        Args:
            session: Identity session to watch
            http_client: Client carrying the ambient credentials (session
                cookie or bearer header)
            endpoint: Sync endpoint path
        """
        self.session = session
        self.http_client = http_client
        self.endpoint = endpoint
        self._state = SyncState.NOT_ATTEMPTED
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> SyncState:
        """Current sync attempt state."""
        return self._state

    @property
    def synced(self) -> bool:
        """Whether a sync has succeeded."""
        return self._state is SyncState.DONE

    def observe(self) -> bool:
        """React to an identity session observation.

        Must be called from a running event loop.

        Returns:
            True if a sync request was dispatched
        """
        if not self.session.is_loaded or self.session.identity is None:
            return False
        if self._state is not SyncState.NOT_ATTEMPTED:
            return False

        self._state = SyncState.IN_FLIGHT
        self._task = asyncio.get_running_loop().create_task(self._sync())
        return True

    async def wait(self) -> None:
        """Wait for the in-flight sync, if any, to settle."""
        if self._task is not None and not self._task.done():
            await asyncio.wait([self._task])

    def close(self) -> None:
        """Abandon the in-flight sync, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        if self._state is SyncState.IN_FLIGHT:
            self._state = SyncState.NOT_ATTEMPTED

    async def _sync(self) -> None:
        try:
            response = await self.http_client.post(self.endpoint)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"User sync failed, will retry on next observation: {e}")
            self._state = SyncState.NOT_ATTEMPTED
            return
        except Exception as e:
            logger.exception(f"Unexpected error syncing user: {str(e)}")
            self._state = SyncState.NOT_ATTEMPTED
            return

        self._state = SyncState.DONE
        logger.info("User synced")
