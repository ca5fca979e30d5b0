"""Checklist use cases.

Builds checklists from GitHub pull requests and stored checks, records
checks, and announces them. Notifications are sent only after the check has
been stored, and their outcome never affects the result of the action.
"""

import re
from typing import List, Optional, Protocol

from infrastructure.logging import get_module_logger
from models.checklist import (
    Checklist,
    ChecklistConfig,
    ChecklistItem,
    ChecklistRef,
    Commit,
    GitHubUser,
    PullRequest,
)
from modules.checklist.config import parse_checklist_config
from modules.checklist.errors import ChecklistConfigError, ChecklistItemNotFound
from modules.checklist.notifications import (
    CheckAdded,
    ChecklistCompleted,
    NotificationDispatcher,
)
from modules.checklist.repository import ChecksRepository
from modules.checklist.urls import UrlBuilder

logger = get_module_logger()

MERGE_COMMIT_PATTERN = re.compile(r"^Merge pull request #(\d+) from ")


class PullRequestGateway(Protocol):
    def get_pull_request(
        self, owner: str, repo: str, number: int, with_commits: bool = True
    ) -> PullRequest: ...

    def get_file(
        self, owner: str, repo: str, path: str, ref: str
    ) -> Optional[bytes]: ...


def merged_pull_request_numbers(commits: List[Commit]) -> List[int]:
    """Numbers of pull requests merged by the given commits, in order, unique."""
    numbers: List[int] = []
    for commit in commits:
        match = MERGE_COMMIT_PATTERN.match(commit.message)
        if match:
            number = int(match.group(1))
            if number not in numbers:
                numbers.append(number)
    return numbers


class ChecklistService:
    """Checklist use cases.

    Args:
        github: Source of pull requests and the config blob
        repository: Storage for checks and users
        dispatcher: Sends chat notifications for check events
        config_path: Repository path of the checklist config blob
    """

    def __init__(
        self,
        github: PullRequestGateway,
        repository: ChecksRepository,
        dispatcher: NotificationDispatcher,
        config_path: str = "prchecklist.yml",
    ):
        self.github = github
        self.repository = repository
        self.dispatcher = dispatcher
        self.config_path = config_path

    def get_checklist(self, ref: ChecklistRef) -> Checklist:
        """Build the checklist for ref with its current checks.

        Raises:
            GitHubError: If GitHub cannot be reached.
        """
        pull_request = self.github.get_pull_request(ref.owner, ref.repo, ref.number)

        items = []
        for number in merged_pull_request_numbers(pull_request.commits):
            sub = self.github.get_pull_request(
                ref.owner, ref.repo, number, with_commits=False
            )
            items.append(ChecklistItem(number=number, title=sub.title))

        checks = self.repository.get_checks(ref)
        users = self.repository.get_users(
            {uid for ids in checks.values() for uid in ids}
        )
        for item in items:
            item.checked_by = [
                users[uid] for uid in checks.get(item.number, []) if uid in users
            ]

        return Checklist(
            pull_request=pull_request,
            stage=ref.stage,
            items=items,
            config=self._load_config(pull_request),
        )

    def add_check(
        self,
        ref: ChecklistRef,
        number: int,
        user: GitHubUser,
        url_builder: UrlBuilder,
    ) -> Checklist:
        """Check item number as user and notify the configured channels.

        Fires CheckAdded, and ChecklistCompleted when this check completes
        the checklist.

        Raises:
            ChecklistItemNotFound: If number is not an item of the checklist.
        """
        checklist = self.get_checklist(ref)
        item = checklist.item(number)
        if item is None:
            raise ChecklistItemNotFound(ref, number)

        was_completed = checklist.completed
        self.repository.add_check(ref, number, user)
        if all(u.id != user.id for u in item.checked_by):
            item.checked_by.append(user)

        logger.info("check_added", checklist=str(ref), item=number, user=user.login)

        self.dispatcher.dispatch(
            checklist, CheckAdded(checklist=checklist, item=item, user=user), url_builder
        )
        if not was_completed and checklist.completed:
            logger.info("checklist_completed", checklist=str(ref))
            self.dispatcher.dispatch(
                checklist, ChecklistCompleted(checklist=checklist), url_builder
            )

        return checklist

    def remove_check(self, ref: ChecklistRef, number: int, user: GitHubUser) -> Checklist:
        """Withdraw user's check from item number. Sends no notification.

        Raises:
            ChecklistItemNotFound: If number is not an item of the checklist.
        """
        checklist = self.get_checklist(ref)
        item = checklist.item(number)
        if item is None:
            raise ChecklistItemNotFound(ref, number)

        self.repository.remove_check(ref, number, user)
        item.checked_by = [u for u in item.checked_by if u.id != user.id]

        logger.info("check_removed", checklist=str(ref), item=number, user=user.login)
        return checklist

    def add_user(self, user: GitHubUser) -> None:
        self.repository.add_user(user)

    def _load_config(self, pull_request: PullRequest) -> Optional[ChecklistConfig]:
        if not pull_request.head_sha:
            return None

        blob = self.github.get_file(
            pull_request.owner,
            pull_request.repo,
            self.config_path,
            pull_request.head_sha,
        )
        if blob is None:
            return None

        try:
            return parse_checklist_config(blob)
        except ChecklistConfigError as e:
            # A broken config must not make the checklist unusable
            logger.warning(
                "checklist_config_invalid",
                owner=pull_request.owner,
                repo=pull_request.repo,
                number=pull_request.number,
                error=str(e),
            )
            return None
