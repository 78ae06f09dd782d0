"""Tests for Message construction, immutability and display."""

from __future__ import annotations

import dataclasses

import pytest

from msgvariants import Message, Pattern, Placeholder, SelectorSet


class TestMessage:
    def test_fields(self, items_one: Message) -> None:
        assert items_one.id == "items-one"
        assert items_one.locale == "en"
        assert items_one.selector_values == SelectorSet.of(COUNT="ONE")

    def test_default_selector_set_is_empty(self) -> None:
        message = Message("msg1", "en", Pattern.of("No items selected."))
        assert message.selector_values == SelectorSet()

    def test_render_delegates_to_pattern(self, items_one: Message) -> None:
        assert items_one.render({"COUNT": "1"}) == "1 item selected."

    def test_str_is_pattern_display(self, items_other: Message) -> None:
        assert str(items_other) == "[{COUNT} items selected.]"

    def test_frozen(self, items_one: Message) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            items_one.locale = "lv"  # type: ignore[misc]

    def test_hashable_and_equal_by_value(self) -> None:
        a = Message("m", "en", Pattern.of(Placeholder("X"), "!"), SelectorSet.of(N="ONE"))
        b = Message("m", "en", Pattern.of(Placeholder("X"), "!"), SelectorSet([("N", "ONE")]))
        assert a == b
        assert hash(a) == hash(b)

    @pytest.mark.parametrize(
        ("kwargs", "error", "match"),
        [
            ({"id": ""}, ValueError, "id must be a non-empty string"),
            ({"locale": ""}, ValueError, "locale must be a non-empty string"),
            ({"pattern": "text"}, TypeError, "pattern must be a Pattern"),
            ({"selector_values": {"COUNT": "ONE"}}, TypeError, "must be a SelectorSet"),
        ],
    )
    def test_invalid_fields_rejected(
        self, kwargs: dict[str, object], error: type[Exception], match: str
    ) -> None:
        fields: dict[str, object] = {
            "id": "m",
            "locale": "en",
            "pattern": Pattern.of("x"),
            "selector_values": SelectorSet(),
        }
        fields.update(kwargs)
        with pytest.raises(error, match=match):
            Message(**fields)  # type: ignore[arg-type]

    def test_guard(self, items_one: Message) -> None:
        assert Message.guard(items_one)
        assert not Message.guard("items-one")
