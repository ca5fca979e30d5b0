"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

import atexit
from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.notifications import BackgroundExecutor
from integrations.github import GitHubClient
from modules.checklist import ChecklistService, InMemoryChecksRepository
from modules.checklist.notifications import NotificationDispatcher


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_notification_executor() -> BackgroundExecutor:
    """
    Get the process-wide executor that runs webhook deliveries.

    The executor is shut down by the server lifespan and, as a fallback,
    at interpreter exit without waiting for queued deliveries.

    Returns:
        BackgroundExecutor: Cached executor sized from settings.notifications.
    """
    settings = get_settings()
    executor = BackgroundExecutor(
        "notifications",
        max_workers=settings.notifications.max_workers,
        max_pending=settings.notifications.max_pending,
    )
    atexit.register(executor.shutdown, wait=False)
    return executor


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """
    Get application-scoped notification dispatcher.

    Returns:
        NotificationDispatcher: Cached dispatcher using the shared executor.
    """
    settings = get_settings()
    return NotificationDispatcher(
        executor=get_notification_executor(),
        timeout_seconds=settings.notifications.timeout_seconds,
    )


@lru_cache
def get_github_client() -> GitHubClient:
    """
    Get application-scoped GitHub API client.

    Returns:
        GitHubClient: Cached client configured from settings.github.
    """
    return GitHubClient(settings=get_settings().github)


@lru_cache
def get_checks_repository() -> InMemoryChecksRepository:
    """
    Get the process-wide checks repository.

    Returns:
        InMemoryChecksRepository: Cached in-memory repository.
    """
    return InMemoryChecksRepository()


@lru_cache
def get_checklist_service() -> ChecklistService:
    """
    Get application-scoped checklist service.

    Usage:
        @router.get("/api/checklist")
        def get_checklist(service: ChecklistServiceDep, ...):
            return service.get_checklist(ref)

    Returns:
        ChecklistService: Cached service wired to GitHub, storage and notifications.
    """
    settings = get_settings()
    return ChecklistService(
        github=get_github_client(),
        repository=get_checks_repository(),
        dispatcher=get_notification_dispatcher(),
        config_path=settings.github.CONFIG_PATH,
    )
