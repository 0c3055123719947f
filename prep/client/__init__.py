"""Client-side helpers for talking to the API."""

from .session import Identity, IdentitySession
from .sync import SYNC_USER_PATH, SyncState, UserSyncTrigger

__all__ = [
    "Identity",
    "IdentitySession",
    "SYNC_USER_PATH",
    "SyncState",
    "UserSyncTrigger",
]
