"""Factories for checklist domain objects used across tests."""

from typing import Dict, List, Optional

from models.checklist import (
    ChannelConfig,
    Checklist,
    ChecklistConfig,
    ChecklistItem,
    Commit,
    GitHubUser,
    NotificationConfig,
    NotificationEventsConfig,
    PullRequest,
)


def make_user(id: int = 1, login: str = "alice", avatar_url: str = "") -> GitHubUser:
    return GitHubUser(id=id, login=login, avatar_url=avatar_url)


def make_merge_commits(numbers: List[int]) -> List[Commit]:
    return [
        Commit(message=f"Merge pull request #{n} from org/feature-{n}\n\nFeature {n}")
        for n in numbers
    ]


def make_pull_request(
    owner: str = "o",
    repo: str = "r",
    number: int = 1,
    title: str = "Release",
    head_sha: str = "abc123",
    merged: Optional[List[int]] = None,
) -> PullRequest:
    return PullRequest(
        title=title,
        owner=owner,
        repo=repo,
        number=number,
        head_sha=head_sha,
        commits=make_merge_commits(merged or []),
    )


def make_notification_config(
    on_check: Optional[List[str]] = None,
    on_complete: Optional[List[str]] = None,
    channels: Optional[Dict[str, str]] = None,
) -> ChecklistConfig:
    """Build a ChecklistConfig; channels maps channel name to webhook URL."""
    if channels is None:
        channels = {"default": "https://hooks.example.com/services/T/B/X"}
    return ChecklistConfig(
        notification=NotificationConfig(
            events=NotificationEventsConfig(
                on_check=on_check if on_check is not None else ["default"],
                on_complete=on_complete if on_complete is not None else ["default"],
            ),
            channels={name: ChannelConfig(url=url) for name, url in channels.items()},
        )
    )


def make_checklist(
    items: Optional[List[ChecklistItem]] = None,
    config: Optional[ChecklistConfig] = None,
    stage: str = "default",
    **pull_request_kwargs,
) -> Checklist:
    if items is None:
        items = [ChecklistItem(number=5, title="Fix bug")]
    return Checklist(
        pull_request=make_pull_request(**pull_request_kwargs),
        stage=stage,
        items=items,
        config=config,
    )
