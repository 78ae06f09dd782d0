"""Tests for TextUnit shape pairing."""

from __future__ import annotations

import pytest

from msgvariants import (
    Message,
    MessageGroup,
    Pattern,
    Placeholder,
    PlaceholderType,
    SelectorSet,
    ShapeMismatchError,
    TextUnit,
)
from msgvariants.diagnostics import DiagnosticCode


@pytest.fixture
def latvian_group() -> MessageGroup:
    count = Placeholder("COUNT", PlaceholderType.PLURAL)
    forms = (("ZERO", " vienumu"), ("ONE", " vienums"), ("OTHER", " vienumi"))
    return MessageGroup.from_messages(
        "items-lv",
        [
            Message(
                f"items-lv-{category.lower()}",
                "lv",
                Pattern.of(count, text),
                SelectorSet.of(COUNT=category),
            )
            for category, text in forms
        ],
    )


class TestTextUnitShape:
    def test_message_pair(self) -> None:
        unit = TextUnit(
            source=Message("hello", "en", Pattern.of("Hello")),
            target=Message("hello-lv", "lv", Pattern.of("Sveiki")),
            id="tu-1",
        )
        assert not unit.is_group
        assert unit.source_locale == "en"
        assert unit.target_locale == "lv"
        assert unit.id == "tu-1"

    def test_group_pair(self, items_group: MessageGroup, latvian_group: MessageGroup) -> None:
        unit = TextUnit(source=items_group, target=latvian_group)
        assert unit.is_group
        assert unit.id is None
        assert unit.source_locale == "en"
        assert unit.target_locale == "lv"

    def test_message_with_group_rejected(
        self, items_one: Message, latvian_group: MessageGroup
    ) -> None:
        with pytest.raises(ShapeMismatchError) as exc_info:
            TextUnit(source=items_one, target=latvian_group)
        error = exc_info.value
        assert error.source_shape == "Message"
        assert error.target_shape == "MessageGroup"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.SHAPE_MISMATCH

    def test_group_with_message_rejected(
        self, items_group: MessageGroup, items_one: Message
    ) -> None:
        with pytest.raises(ShapeMismatchError, match="MessageGroup with target Message"):
            TextUnit(source=items_group, target=items_one)

    @pytest.mark.parametrize("other", ["plain text", None, 42])
    def test_non_message_sides_rejected(self, items_one: Message, other: object) -> None:
        with pytest.raises(ShapeMismatchError):
            TextUnit(source=other, target=items_one)  # type: ignore[arg-type]
        with pytest.raises(ShapeMismatchError):
            TextUnit(source=items_one, target=other)  # type: ignore[arg-type]

    def test_mixed_locale_group_has_no_locale(self, items_one: Message) -> None:
        mixed = MessageGroup.from_messages(
            "mixed",
            [items_one, Message("x", "lv", Pattern.of("x"), SelectorSet.of(COUNT="OTHER"))],
        )
        unit = TextUnit(source=mixed, target=MessageGroup("empty"))
        assert unit.source_locale is None
        assert unit.target_locale is None

    def test_identity_equality(self, items_one: Message) -> None:
        target = Message("t", "lv", Pattern.of("x"))
        assert TextUnit(items_one, target) != TextUnit(items_one, target)
