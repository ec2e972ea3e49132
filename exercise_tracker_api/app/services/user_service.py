"""
Business logic for users.
"""

import logging
from typing import Any, List, Mapping

from ..core.errors import ValidationError
from ..core.store import UserRegistry
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Create and enumerate users held by a ``UserRegistry``.

    Usernames are not required to be unique; two users may share one
    and are told apart by their id.
    """

    @classmethod
    async def create_user(cls, registry: UserRegistry, payload: Mapping[str, Any]) -> UserRead:
        """Register a user from the ``username`` field of ``payload``.

        Raises ``ValidationError`` if the username is missing, empty or
        not a string.  Nothing is stored in that case.
        """
        username = payload.get("username")
        if not username or not isinstance(username, str):
            logger.warning("Rejected user creation without a username")
            raise ValidationError("Username is required")
        user = registry.create_user(username)
        logger.info("Created user %s (%s)", user.id, user.username)
        return UserRead.model_validate(user)

    @classmethod
    async def list_users(cls, registry: UserRegistry) -> List[UserRead]:
        """Return every user in creation order, without logs."""
        return [UserRead.model_validate(user) for user in registry.list_users()]
