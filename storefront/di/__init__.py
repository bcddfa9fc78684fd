from .base_container import BaseContainer
from .container import DIContainer, get_container, init_container, reset_container

__all__ = [
    "BaseContainer",
    "DIContainer",
    "get_container",
    "init_container",
    "reset_container",
]
