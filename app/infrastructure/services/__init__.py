"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    ChecklistServiceDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_notification_executor,
    get_notification_dispatcher,
    get_github_client,
    get_checks_repository,
    get_checklist_service,
)

__all__ = [
    "SettingsDep",
    "ChecklistServiceDep",
    "get_settings",
    "get_notification_executor",
    "get_notification_dispatcher",
    "get_github_client",
    "get_checks_repository",
    "get_checklist_service",
]
