"""Unit tests for dependency providers."""

import pytest

from infrastructure.notifications import BackgroundExecutor
from infrastructure.services import (
    get_checklist_service,
    get_notification_dispatcher,
    get_notification_executor,
    get_settings,
)
from integrations.github import GitHubClient
from modules.checklist import ChecklistService, InMemoryChecksRepository


@pytest.mark.unit
class TestProviders:
    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_executor_is_sized_from_settings(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_MAX_WORKERS", "3")
        monkeypatch.setenv("NOTIFICATION_MAX_PENDING", "12")

        executor = get_notification_executor()

        assert isinstance(executor, BackgroundExecutor)
        assert executor.max_workers == 3
        assert executor.max_pending == 12
        executor.shutdown()

    def test_dispatcher_shares_executor(self):
        assert get_notification_dispatcher().executor is get_notification_executor()

    def test_checklist_service_wiring(self):
        service = get_checklist_service()

        assert isinstance(service, ChecklistService)
        assert isinstance(service.github, GitHubClient)
        assert isinstance(service.repository, InMemoryChecksRepository)
        assert service.dispatcher is get_notification_dispatcher()
        assert service.config_path == get_settings().github.CONFIG_PATH
        assert get_checklist_service() is service
