"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.github import GitHubSettings

__all__ = [
    "GitHubSettings",
]
