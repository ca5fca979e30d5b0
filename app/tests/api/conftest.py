from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from infrastructure.operations import OperationResult
from infrastructure.services import get_checklist_service, get_settings
from modules.checklist import ChecklistService, InMemoryChecksRepository
from modules.checklist.notifications import NotificationDispatcher
from server.server import handler

CONFIG_BLOB = """
notification:
  events:
    on_check: [default]
    on_complete: [default, ops]
  channels:
    default:
      url: https://hooks.example.com/services/A
    ops:
      url: https://hooks.example.com/services/B
"""

ALICE_HEADERS = {"X-GitHub-User-Id": "1", "X-GitHub-Login": "alice"}


@pytest.fixture
def sent_messages():
    """(channel name, message) pairs delivered by the app under test."""
    return []


@pytest.fixture
def checklist_service(fake_github, pull_request_factory, immediate_executor, sent_messages):
    fake_github.add_pull_request(pull_request_factory(number=1, merged=[2, 3]))
    fake_github.add_pull_request(pull_request_factory(number=2, title="Feature A"))
    fake_github.add_pull_request(pull_request_factory(number=3, title="Feature B"))
    fake_github.add_file("o", "r", "prchecklist.yml", "abc123", CONFIG_BLOB)

    def channel_factory(name, config):
        channel = MagicMock()
        channel.channel_name = name
        channel.target = config.url
        channel.send.side_effect = lambda message: (
            sent_messages.append((name, message)) or OperationResult.success()
        )
        return channel

    return ChecklistService(
        github=fake_github,
        repository=InMemoryChecksRepository(),
        dispatcher=NotificationDispatcher(
            immediate_executor, channel_factory=channel_factory
        ),
    )


@pytest.fixture
def client(checklist_service):
    handler.dependency_overrides[get_checklist_service] = lambda: checklist_service
    yield TestClient(handler)
    handler.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Replace the settings dependency for the duration of a test."""

    def _override(settings):
        handler.dependency_overrides[get_settings] = lambda: settings

    return _override
