"""Checklist feature module.

Tracks reviewer check-marks on the sub pull requests of a release pull
request and announces checks and completion to chat channels.
"""

from modules.checklist.errors import (
    ChecklistConfigError,
    ChecklistError,
    ChecklistItemNotFound,
    DispatchError,
    UnknownEventKind,
)
from modules.checklist.repository import ChecksRepository, InMemoryChecksRepository
from modules.checklist.service import ChecklistService
from modules.checklist.urls import UrlBuilder, build_url

__all__ = [
    "ChecklistConfigError",
    "ChecklistError",
    "ChecklistItemNotFound",
    "DispatchError",
    "UnknownEventKind",
    "ChecksRepository",
    "InMemoryChecksRepository",
    "ChecklistService",
    "UrlBuilder",
    "build_url",
]
