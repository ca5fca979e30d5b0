"""Unit tests for notification event rendering and classification."""

from functools import partial

import pytest

from modules.checklist.errors import UnknownEventKind
from modules.checklist.notifications.events import (
    CheckAdded,
    ChecklistCompleted,
    EventKind,
    event_kind,
    render_message,
)
from modules.checklist.urls import build_url

url_builder = partial(build_url, "http://x")


@pytest.mark.unit
class TestRenderMessage:
    def test_check_added(self, checklist_factory, user_factory):
        checklist = checklist_factory()
        event = CheckAdded(
            checklist=checklist, item=checklist.items[0], user=user_factory()
        )

        assert (
            render_message(event, url_builder)
            == '[<http://x/o/r/pull/1|o/r#1>] #5 "Fix bug" checked by alice'
        )

    def test_checklist_completed(self, checklist_factory):
        event = ChecklistCompleted(checklist=checklist_factory())

        assert (
            render_message(event, url_builder)
            == "[<http://x/o/r/pull/1|o/r#1>] Checklist completed! \U0001f389"
        )

    def test_title_quotes_and_backslashes_are_escaped(
        self, checklist_factory, item_factory, user_factory
    ):
        item = item_factory(title='Say "hi" \\ bye')
        checklist = checklist_factory(items=[item])
        event = CheckAdded(checklist=checklist, item=item, user=user_factory())

        assert render_message(event, url_builder).endswith(
            '#5 "Say \\"hi\\" \\\\ bye" checked by alice'
        )

    @pytest.mark.parametrize(
        "title, quoted",
        [
            ("a\tb\nc\a", '"a\\tb\\nc\\a"'),
            ("soh\x01", '"soh\\x01"'),
            ("del\x7f", '"del\\x7f"'),
            ("nbsp\u00a0", '"nbsp\\u00a0"'),
        ],
    )
    def test_control_characters_are_escaped(
        self, checklist_factory, item_factory, user_factory, title, quoted
    ):
        item = item_factory(title=title)
        checklist = checklist_factory(items=[item])
        event = CheckAdded(checklist=checklist, item=item, user=user_factory())

        assert f"#5 {quoted} checked by alice" in render_message(event, url_builder)

    def test_non_ascii_title_is_kept_readable(
        self, checklist_factory, item_factory, user_factory
    ):
        item = item_factory(title="Corriger l'été")
        checklist = checklist_factory(items=[item])
        event = CheckAdded(checklist=checklist, item=item, user=user_factory())

        assert "\"Corriger l'été\"" in render_message(event, url_builder)

    def test_stage_is_part_of_link_and_title(self, checklist_factory):
        event = ChecklistCompleted(checklist=checklist_factory(stage="qa"))

        assert render_message(event, url_builder).startswith(
            "[<http://x/o/r/pull/1/qa|o/r#1::qa>]"
        )

    def test_url_builder_receives_checklist_path(self, checklist_factory):
        paths = []

        def recording_builder(path):
            paths.append(path)
            return "https://checklist.example.com" + path

        render_message(ChecklistCompleted(checklist=checklist_factory()), recording_builder)

        assert paths == ["/o/r/pull/1"]

    def test_unknown_event_raises(self):
        with pytest.raises(UnknownEventKind):
            render_message("not an event", url_builder)  # type: ignore[arg-type]


@pytest.mark.unit
class TestEventKind:
    def test_check_added_is_on_check(self, checklist_factory, user_factory):
        checklist = checklist_factory()
        event = CheckAdded(
            checklist=checklist, item=checklist.items[0], user=user_factory()
        )

        assert event_kind(event) is EventKind.ON_CHECK
        assert event_kind(event).value == "on_check"

    def test_checklist_completed_is_on_complete(self, checklist_factory):
        event = ChecklistCompleted(checklist=checklist_factory())

        assert event_kind(event) is EventKind.ON_COMPLETE

    def test_unknown_event_raises(self):
        with pytest.raises(UnknownEventKind) as exc_info:
            event_kind(object())  # type: ignore[arg-type]

        assert "unknown notification event kind" in str(exc_info.value)

    def test_events_are_immutable(self, checklist_factory):
        event = ChecklistCompleted(checklist=checklist_factory())

        with pytest.raises(AttributeError):
            event.checklist = checklist_factory()  # type: ignore[misc]
