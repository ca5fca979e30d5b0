"""Notification events.

The closed set of occurrences that notify chat channels. Each event renders
into a single line of Slack-flavoured text and belongs to one configured
event kind. Both operations match exhaustively over the two variants.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from models.checklist import Checklist, ChecklistItem, GitHubUser
from modules.checklist.errors import UnknownEventKind
from modules.checklist.urls import UrlBuilder

COMPLETED_MARKER = "\U0001f389"

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


class EventKind(Enum):
    """Event kinds as they appear under notification.events in the config."""

    ON_CHECK = "on_check"
    ON_COMPLETE = "on_complete"


@dataclass(frozen=True)
class CheckAdded:
    """A user checked an item."""

    checklist: Checklist
    item: ChecklistItem
    user: GitHubUser


@dataclass(frozen=True)
class ChecklistCompleted:
    """The last outstanding item of a checklist was checked."""

    checklist: Checklist


NotificationEvent = Union[CheckAdded, ChecklistCompleted]


def event_kind(event: NotificationEvent) -> EventKind:
    """Classify an event into its configured event kind.

    Raises:
        UnknownEventKind: If event is not one of the known variants.
    """
    match event:
        case CheckAdded():
            return EventKind.ON_CHECK
        case ChecklistCompleted():
            return EventKind.ON_COMPLETE
    raise UnknownEventKind(event)


def render_message(event: NotificationEvent, url_builder: UrlBuilder) -> str:
    """Render the chat message text for an event.

    Args:
        event: The event to render.
        url_builder: Turns the checklist path into an absolute URL.

    Returns:
        A single line of text, e.g.
        '[<https://example.com/o/r/pull/1|o/r#1>] #5 "Fix bug" checked by alice'

    Raises:
        UnknownEventKind: If event is not one of the known variants.
    """
    match event:
        case CheckAdded(checklist=checklist, item=item, user=user):
            return (
                f"{_link(checklist, url_builder)} "
                f"#{item.number} {_quote(item.title)} checked by {user.login}"
            )
        case ChecklistCompleted(checklist=checklist):
            return (
                f"{_link(checklist, url_builder)} "
                f"Checklist completed! {COMPLETED_MARKER}"
            )
    raise UnknownEventKind(event)


def _link(checklist: Checklist, url_builder: UrlBuilder) -> str:
    url = url_builder(checklist.path())
    return f"[<{url}|{checklist}>]"


def _quote(text: str) -> str:
    """Double-quote text with backslash escapes.

    Printable characters, non-ASCII included, are kept as they are. Quotes,
    backslashes and the usual control characters get short escapes. Other
    ASCII control characters and DEL become \\xNN, and any other
    non-printable character becomes \\uNNNN or \\UNNNNNNNN.
    """
    parts = []
    for char in text:
        code = ord(char)
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif code < 0x80:
            parts.append(f"\\x{code:02x}")
        elif code <= 0xFFFF:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'
