from unittest.mock import MagicMock

import pytest

from infrastructure.operations import OperationResult
from infrastructure.services import providers
from models.checklist import ChecklistItem
from tests.factories.checklist import (
    make_checklist,
    make_notification_config,
    make_pull_request,
    make_user,
)
from tests.factories.github import FakeGitHub


class ImmediateExecutor:
    """Runs submitted tasks inline so deliveries can be asserted directly."""

    def __init__(self):
        self.submitted = []

    def submit(self, fn, *args, **kwargs) -> bool:
        self.submitted.append((fn, args, kwargs))
        fn(*args, **kwargs)
        return True


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset lru_cache singletons so each test builds its own services."""
    yield
    for provider in (
        providers.get_checklist_service,
        providers.get_checks_repository,
        providers.get_github_client,
        providers.get_notification_dispatcher,
        providers.get_notification_executor,
        providers.get_settings,
    ):
        provider.cache_clear()


@pytest.fixture
def user_factory():
    """Factory for GitHubUser instances.

    Example:
        alice = user_factory()
        bob = user_factory(id=2, login="bob")
    """
    return make_user


@pytest.fixture
def pull_request_factory():
    """Factory for PullRequest instances; merged lists sub pull request numbers."""
    return make_pull_request


@pytest.fixture
def notification_config_factory():
    """Factory for ChecklistConfig instances with a notification section.

    Example:
        config = notification_config_factory(
            on_check=["default", "ops"],
            channels={"default": "https://hooks.example.com/a"},
        )
    """
    return make_notification_config


@pytest.fixture
def checklist_factory():
    """Factory for Checklist instances (o/r#1 with item #5 "Fix bug" by default)."""
    return make_checklist


@pytest.fixture
def item_factory():
    def _factory(number: int = 5, title: str = "Fix bug", checked_by=None):
        return ChecklistItem(number=number, title=title, checked_by=checked_by or [])

    return _factory


@pytest.fixture
def immediate_executor():
    return ImmediateExecutor()


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def mock_channel():
    """NotificationChannel mock whose send() succeeds."""
    channel = MagicMock()
    channel.channel_name = "default"
    channel.target = "https://hooks.example.com"
    channel.send.return_value = OperationResult.success(data={"status_code": 200})
    return channel
