"""Canonical checklist URLs."""

from typing import Callable

# Maps an application path (Checklist.path()) to an absolute URL
UrlBuilder = Callable[[str], str]


def build_url(base_url: str, path: str) -> str:
    """Join the site base URL and an application path.

    Example:
        build_url("https://checklist.example.com/", "/o/r/pull/1")
        # -> "https://checklist.example.com/o/r/pull/1"
    """
    return base_url.rstrip("/") + "/" + path.lstrip("/")
