"""Tests for MessageGroup insertion and variant resolution.

Tests verify:
- insert then resolve round-trips
- Duplicate keys raise DuplicateVariantError and keep the first variant
- Exact-only groups fail with NoVariantFound on unknown queries
- Fallback (group default or per call) reaches the OTHER catch-all
- Empty SelectorSet is the final candidate
- Deterministic display and sorted iteration
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgvariants import (
    DuplicateVariantError,
    FallbackPolicy,
    Message,
    MessageGroup,
    NoVariantFound,
    NoVariantFoundError,
    Pattern,
    SelectorSet,
)
from msgvariants.diagnostics import DiagnosticCode
from tests.strategies import selector_sets


def _message(message_id: str, text: str, **selectors: str) -> Message:
    return Message(message_id, "en", Pattern.of(text), SelectorSet(selectors))


class TestItemsScenario:
    """The canonical plural example: ONE and OTHER variants of "items"."""

    def test_resolve_one_and_render(self, items_group: MessageGroup) -> None:
        message = items_group.resolve(SelectorSet.of(COUNT="ONE"))
        assert message.id == "items-one"
        assert message.render({"COUNT": "1"}) == "1 item selected."

    def test_resolve_other_and_render(self, items_group: MessageGroup) -> None:
        message = items_group.resolve(SelectorSet.of(COUNT="OTHER"))
        assert message.render({"COUNT": "5"}) == "5 items selected."

    def test_unknown_category_without_fallback_fails(self, items_group: MessageGroup) -> None:
        with pytest.raises(NoVariantFound) as exc_info:
            items_group.resolve(SelectorSet.of(COUNT="FEW"))
        error = exc_info.value
        assert error.group_id == "items"
        assert error.query == SelectorSet.of(COUNT="FEW")
        assert error.tried == (SelectorSet.of(COUNT="FEW"),)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.NO_VARIANT_FOUND

    def test_unknown_category_with_group_fallback(
        self, items_one: Message, items_other: Message
    ) -> None:
        group = MessageGroup.from_messages(
            "items", [items_one, items_other], fallback=FallbackPolicy()
        )
        assert group.resolve(SelectorSet.of(COUNT="FEW")) is items_other

    def test_unknown_category_with_per_call_fallback(
        self, items_group: MessageGroup, items_other: Message
    ) -> None:
        assert items_group.resolve(SelectorSet.of(COUNT="FEW"), fallback=True) is items_other
        assert (
            items_group.resolve(SelectorSet.of(COUNT="MANY"), fallback=FallbackPolicy())
            is items_other
        )

    def test_per_call_false_disables_group_fallback(
        self, items_one: Message, items_other: Message
    ) -> None:
        group = MessageGroup.from_messages(
            "items", [items_one, items_other], fallback=FallbackPolicy()
        )
        with pytest.raises(NoVariantFoundError):
            group.resolve(SelectorSet.of(COUNT="FEW"), fallback=False)

    def test_exact_match_preferred_over_fallback(
        self, items_one: Message, items_other: Message
    ) -> None:
        group = MessageGroup.from_messages(
            "items", [items_one, items_other], fallback=FallbackPolicy()
        )
        assert group.resolve(SelectorSet.of(COUNT="ONE")) is items_one


class TestInsert:
    def test_insert_then_resolve_round_trip(self) -> None:
        group = MessageGroup("g")
        message = _message("m1", "x", COUNT="=0")
        group.insert(message)
        assert group.resolve(SelectorSet.of(COUNT="=0")) is message

    @given(keys=st.lists(selector_sets(), max_size=8))
    def test_round_trip_property(self, keys: list[SelectorSet]) -> None:
        """PROPERTY: every distinct inserted key resolves to its own message."""
        group = MessageGroup("g")
        inserted: dict[SelectorSet, Message] = {}
        for index, key in enumerate(keys):
            if key in inserted:
                continue
            message = Message(f"m{index}", "en", Pattern.of(str(index)), key)
            group.insert(message)
            inserted[key] = message
        for key, message in inserted.items():
            rebuilt = SelectorSet(reversed(list(key.items())))
            assert group.resolve(rebuilt) is message
        assert len(group) == len(inserted)

    def test_duplicate_rejected_and_first_kept(self) -> None:
        group = MessageGroup("g")
        first = _message("first", "1", COUNT="ONE", GENDER="NEUTER")
        second = _message("second", "2", GENDER="NEUTER", COUNT="ONE")
        group.insert(first)

        with pytest.raises(DuplicateVariantError) as exc_info:
            group.insert(second)

        assert exc_info.value.group_id == "g"
        assert exc_info.value.selector_values == second.selector_values
        assert len(group) == 1
        assert group.resolve(SelectorSet.of(COUNT="ONE", GENDER="NEUTER")) is first

    def test_from_messages_fails_on_duplicate(self) -> None:
        with pytest.raises(DuplicateVariantError, match="already has a variant"):
            MessageGroup.from_messages(
                "g", [_message("a", "1", N="ONE"), _message("b", "2", N="ONE")]
            )

    def test_insert_requires_message(self) -> None:
        with pytest.raises(TypeError, match="accepts Message variants"):
            MessageGroup("g").insert("not a message")  # type: ignore[arg-type]

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty string"):
            MessageGroup("")


class TestResolve:
    def test_query_must_be_selector_set(self, items_group: MessageGroup) -> None:
        with pytest.raises(TypeError, match="expects a SelectorSet"):
            items_group.resolve({"COUNT": "ONE"})  # type: ignore[arg-type]

    def test_invalid_fallback_argument(self, items_group: MessageGroup) -> None:
        with pytest.raises(TypeError, match="fallback must be"):
            items_group.resolve(SelectorSet.of(COUNT="ONE"), fallback="yes")  # type: ignore[arg-type]

    def test_empty_selector_set_is_last_resort(self) -> None:
        default = _message("default", "generic")
        group = MessageGroup.from_messages(
            "g", [default, _message("one", "single", COUNT="ONE")], fallback=FallbackPolicy()
        )
        assert group.resolve(SelectorSet.of(COUNT="FEW", GENDER="FEMININE")) is default

    def test_empty_group_fails_even_with_fallback(self) -> None:
        group = MessageGroup("empty", fallback=FallbackPolicy())
        with pytest.raises(NoVariantFoundError) as exc_info:
            group.resolve(SelectorSet.of(COUNT="FEW"))
        assert exc_info.value.tried == (
            SelectorSet.of(COUNT="FEW"),
            SelectorSet.of(COUNT="OTHER"),
            SelectorSet(),
        )

    def test_multi_selector_fallback_follows_drop_order(self) -> None:
        count_other = _message("count-other", "a", COUNT="OTHER", GENDER="FEMININE")
        gender_other = _message("gender-other", "b", COUNT="FEW", GENDER="OTHER")
        group = MessageGroup.from_messages("g", [count_other, gender_other])
        query = SelectorSet.of(COUNT="FEW", GENDER="FEMININE")

        by_gender = FallbackPolicy(drop_order=("GENDER",))
        by_count = FallbackPolicy(drop_order=("COUNT",))

        assert group.resolve(query, fallback=by_gender) is gender_other
        assert group.resolve(query, fallback=by_count) is count_other

    def test_combined_catch_all_is_last_resort(self) -> None:
        """A group whose only fallback is {COUNT:OTHER, GENDER:OTHER} still resolves."""
        one = _message("one-other", "a", COUNT="ONE", GENDER="OTHER")
        catch_all = _message("other-other", "b", COUNT="OTHER", GENDER="OTHER")
        group = MessageGroup.from_messages("g", [one, catch_all], fallback=FallbackPolicy())

        assert group.resolve(SelectorSet.of(COUNT="FEW", GENDER="FEMININE")) is catch_all
        assert group.resolve(SelectorSet.of(COUNT="ONE", GENDER="MASCULINE")) is catch_all

    def test_drop_keys_disabled_keeps_selectors(self) -> None:
        generic = _message("generic", "x")
        group = MessageGroup.from_messages("g", [generic])
        with pytest.raises(NoVariantFoundError):
            group.resolve(
                SelectorSet.of(COUNT="FEW"), fallback=FallbackPolicy(drop_keys=False)
            )

    def test_candidates_reflect_group_policy(self, items_group: MessageGroup) -> None:
        query = SelectorSet.of(COUNT="FEW")
        assert items_group.candidates(query) == (query,)
        group = MessageGroup("g", fallback=FallbackPolicy())
        assert group.candidates(query) == (
            query,
            SelectorSet.of(COUNT="OTHER"),
            SelectorSet(),
        )


class TestGroupViews:
    def test_mapping_views(self, items_group: MessageGroup, items_one: Message) -> None:
        key = SelectorSet.of(COUNT="ONE")
        assert key in items_group
        assert items_group.get(key) is items_one
        assert items_group.get(SelectorSet.of(COUNT="FEW")) is None
        assert set(items_group.keys()) == {key, SelectorSet.of(COUNT="OTHER")}
        assert items_group.variants[key] is items_one
        assert {m.id for m in items_group} == {"items-one", "items-other"}
        assert items_group.locales == frozenset({"en"})

    def test_variants_snapshot_is_read_only(self, items_group: MessageGroup) -> None:
        with pytest.raises(TypeError):
            items_group.variants[SelectorSet()] = None  # type: ignore[index]

    def test_sorted_variants_deterministic(self) -> None:
        group = MessageGroup.from_messages(
            "g",
            [
                _message("other", "o", COUNT="OTHER"),
                _message("zero", "z", COUNT="=0"),
                _message("one", "1", COUNT="ONE"),
            ],
        )
        assert [m.id for m in group.sorted_variants()] == ["zero", "one", "other"]

    def test_str_listing(self, items_group: MessageGroup) -> None:
        assert str(items_group) == (
            "items: {\n"
            "  {COUNT:ONE}: [{COUNT} item selected.]\n"
            "  {COUNT:OTHER}: [{COUNT} items selected.]\n"
            "}"
        )

    def test_repr(self, items_group: MessageGroup) -> None:
        assert repr(items_group) == "MessageGroup(id='items', variants=2)"

    def test_guard(self, items_group: MessageGroup, items_one: Message) -> None:
        assert MessageGroup.guard(items_group)
        assert not MessageGroup.guard(items_one)
