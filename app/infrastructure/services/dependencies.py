"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.services.providers import (
    get_settings,
    get_checklist_service,
)
from modules.checklist import ChecklistService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Checklist use cases
ChecklistServiceDep = Annotated[ChecklistService, Depends(get_checklist_service)]

__all__ = [
    "SettingsDep",
    "ChecklistServiceDep",
]
