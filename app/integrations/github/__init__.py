"""GitHub integration module."""

from .client import GitHubClient, GitHubError

__all__ = ["GitHubClient", "GitHubError"]
