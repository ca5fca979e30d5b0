"""Checklist and notification dispatch errors."""

from typing import Any

from models.checklist import ChecklistRef


class ChecklistError(Exception):
    """Base class for checklist use-case errors."""


class ChecklistItemNotFound(ChecklistError):
    """The requested item is not part of the checklist."""

    def __init__(self, ref: ChecklistRef, number: int):
        self.ref = ref
        self.number = number
        super().__init__(f"{ref} has no item #{number}")


class ChecklistConfigError(ChecklistError):
    """The repository's checklist configuration could not be parsed."""


class DispatchError(Exception):
    """Base class for errors that prevent notification dispatch."""


class UnknownEventKind(DispatchError):
    """Raised for a value outside the closed set of notification events.

    Only reachable through a programming error in the caller.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"unknown notification event kind: {value!r}")
