from .user_locks import UserLockRegistry

__all__ = ["UserLockRegistry"]
