"""Fallback policy for variant resolution.

When a query has no exact variant, MessageGroup.resolve() walks a
deterministic candidate sequence built by FallbackPolicy.candidates():

1. The query itself.
2. Values are replaced with ``catch_all`` (default "OTHER") one name at a
   time, cumulatively, until every selector holds the catch-all. Names
   listed in ``drop_order`` go first, in that order; remaining names follow
   in sorted order.
3. With ``drop_keys``, the catch-all selectors are then removed one at a
   time in the same order, ending with the empty SelectorSet.
4. Candidates already produced are skipped.

Example for query {COUNT:FEW, GENDER:FEMININE} with drop_order=("GENDER",):

    {COUNT:FEW, GENDER:FEMININE}
    {COUNT:FEW, GENDER:OTHER}
    {COUNT:OTHER, GENDER:OTHER}
    {COUNT:OTHER}
    {}

The all-catch-all variant, if present, is therefore tried before any
selector is ignored.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from msgvariants.constants import CATCH_ALL_VALUE
from msgvariants.model.selectors import SelectorSet

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["DEFAULT_FALLBACK", "FallbackPolicy"]


@dataclass(frozen=True, slots=True)
class FallbackPolicy:
    """Immutable configuration for catch-all variant resolution.

    All fields have defaults; ``FallbackPolicy()`` relaxes selectors in
    sorted name order, sets each to "OTHER", then drops them all.

    Attributes:
        catch_all: Selector value tried before selectors are dropped
        drop_order: Selector names to relax first, least specific first
        drop_keys: After the all-catch-all attempt, remove selectors one at
            a time, ending with the empty SelectorSet (default: True)

    Example:
        >>> policy = FallbackPolicy(drop_order=("GENDER",))
        >>> [str(c) for c in policy.candidates(SelectorSet.of(COUNT="FEW"))]
        ['{COUNT:FEW}', '{COUNT:OTHER}', '{}']
    """

    catch_all: str = CATCH_ALL_VALUE
    drop_order: tuple[str, ...] = ()
    drop_keys: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If catch_all is empty or drop_order repeats a name.
        """
        if not isinstance(self.catch_all, str) or not self.catch_all:
            msg = "catch_all must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.drop_order, tuple):
            object.__setattr__(self, "drop_order", tuple(self.drop_order))
        if len(set(self.drop_order)) != len(self.drop_order):
            msg = "drop_order must not repeat selector names"
            raise ValueError(msg)

    def relax_order(self, query: SelectorSet) -> tuple[str, ...]:
        """Selector names of ``query`` in the order they are relaxed."""
        listed = tuple(name for name in self.drop_order if name in query)
        rest = tuple(sorted(name for name in query if name not in self.drop_order))
        return listed + rest

    def candidates(self, query: SelectorSet) -> Iterator[SelectorSet]:
        """Yield selector sets to try, most specific first, without repeats."""
        seen: set[SelectorSet] = set()

        def fresh(candidate: SelectorSet) -> bool:
            if candidate in seen:
                return False
            seen.add(candidate)
            return True

        order = self.relax_order(query)
        current = query
        if fresh(current):
            yield current
        for name in order:
            current = current.with_value(name, self.catch_all)
            if fresh(current):
                yield current
        if not self.drop_keys:
            return
        for name in order:
            current = current.without(name)
            if fresh(current):
                yield current


# Policy used by validation to decide whether a group has a last resort.
DEFAULT_FALLBACK: FallbackPolicy = FallbackPolicy()
