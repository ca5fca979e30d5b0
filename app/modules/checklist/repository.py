"""Storage of checks and users.

ChecksRepository is the port the checklist service depends on. The
in-memory implementation keeps everything in process and is safe to share
between request threads.
"""

from threading import Lock
from typing import Dict, Iterable, Protocol

from models.checklist import ChecklistRef, Checks, GitHubUser


class ChecksRepository(Protocol):
    def get_checks(self, ref: ChecklistRef) -> Checks: ...

    def add_check(self, ref: ChecklistRef, number: int, user: GitHubUser) -> None: ...

    def remove_check(self, ref: ChecklistRef, number: int, user: GitHubUser) -> None: ...

    def add_user(self, user: GitHubUser) -> None: ...

    def get_users(self, user_ids: Iterable[int]) -> Dict[int, GitHubUser]: ...


class InMemoryChecksRepository:
    """Process-local ChecksRepository."""

    def __init__(self):
        self._checks: Dict[ChecklistRef, Checks] = {}
        self._users: Dict[int, GitHubUser] = {}
        self._lock = Lock()

    def get_checks(self, ref: ChecklistRef) -> Checks:
        """Return a copy of the checks recorded for ref."""
        with self._lock:
            checks = self._checks.get(ref, {})
            return {number: list(ids) for number, ids in checks.items()}

    def add_check(self, ref: ChecklistRef, number: int, user: GitHubUser) -> None:
        """Record that user checked item number. Checking twice is a no-op."""
        with self._lock:
            self._users[user.id] = user
            ids = self._checks.setdefault(ref, {}).setdefault(number, [])
            if user.id not in ids:
                ids.append(user.id)

    def remove_check(self, ref: ChecklistRef, number: int, user: GitHubUser) -> None:
        with self._lock:
            ids = self._checks.get(ref, {}).get(number)
            if ids and user.id in ids:
                ids.remove(user.id)

    def add_user(self, user: GitHubUser) -> None:
        with self._lock:
            self._users[user.id] = user

    def get_users(self, user_ids: Iterable[int]) -> Dict[int, GitHubUser]:
        with self._lock:
            return {uid: self._users[uid] for uid in user_ids if uid in self._users}
