from typing import TYPE_CHECKING
from ...domain.repositories.user_store import UserStore
from ...application.services.user_locks import UserLockRegistry
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    """Profile settings use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(
                user_store=container.get(UserStore),
                user_locks=container.get(UserLockRegistry),
            )
        )
