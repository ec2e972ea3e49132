"""
In‑memory user store.

``UserRegistry`` holds every user and their exercise log for the
lifetime of the process.  Nothing is persisted: a new registry starts
empty and its contents disappear with it.  One registry is created per
application by ``create_app`` and handed to the services, so tests can
build isolated applications with their own registries.

ASGI servers may run handlers concurrently, therefore every read and
mutation goes through a single lock.  Readers receive copies of the
log so they can filter without holding it.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

from .errors import UserNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExerciseRecord:
    """A single entry in a user's log."""

    description: str
    duration: int
    date: date


@dataclass
class UserRecord:
    """A registered user together with their append‑only log."""

    id: str
    username: str
    log: List[ExerciseRecord] = field(default_factory=list)


class UserRegistry:
    """Process‑local collection of users keyed by a sequential id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: List[UserRecord] = []
        self._by_id: Dict[str, UserRecord] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def create_user(self, username: str) -> UserRecord:
        """Store a new user with an empty log and return it.

        Ids are the decimal string of a counter starting at 1; they are
        never reused for the lifetime of the registry.
        """
        with self._lock:
            user = UserRecord(id=str(self._next_id), username=username)
            self._next_id += 1
            self._users.append(user)
            self._by_id[user.id] = user
        logger.debug("Stored user %s (%s)", user.id, username)
        return user

    def list_users(self) -> List[UserRecord]:
        """Return all users in creation order."""
        with self._lock:
            return list(self._users)

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return self._by_id.get(user_id)

    def add_exercise(self, user_id: str, exercise: ExerciseRecord) -> UserRecord:
        """Append ``exercise`` to the log of ``user_id``.

        Raises ``UserNotFoundError`` if no such user exists.
        """
        with self._lock:
            user = self._by_id.get(user_id)
            if user is None:
                raise UserNotFoundError()
            user.log.append(exercise)
        return user

    def snapshot_log(self, user_id: str) -> Tuple[UserRecord, List[ExerciseRecord]]:
        """Return the user and a copy of their log, in insertion order."""
        with self._lock:
            user = self._by_id.get(user_id)
            if user is None:
                raise UserNotFoundError()
            return user, list(user.log)
