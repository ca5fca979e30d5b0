"""Infrastructure configuration module - public API.

Centralized configuration management for prchecklist using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    NotificationSettings: Webhook delivery settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    github_token = settings.github.GITHUB_TOKEN
    max_workers = settings.notifications.max_workers

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.notifications import (
    NotificationSettings,
)

__all__ = ["Settings", "NotificationSettings"]
