"""Authentication use cases."""

from .sync_user import SyncUserRequest, SyncUserResponse, SyncUserUseCase

__all__ = [
    "SyncUserRequest",
    "SyncUserResponse",
    "SyncUserUseCase",
]
