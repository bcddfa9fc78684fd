from .user_store import UserStore

__all__ = ["UserStore"]
