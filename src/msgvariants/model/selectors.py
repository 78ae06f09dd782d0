"""SelectorSet: unordered selector-name to selector-value mapping.

A SelectorSet is both the runtime query passed to MessageGroup.resolve()
and the key each variant is stored under. Because it keys an unordered
index, equality is set-of-pairs equality and the hash is an explicit
order-independent fold over per-pair hashes. Equal sets therefore hash
identically no matter how they were constructed.

No partial or subset matching is defined here; fallback is a resolution
policy (see msgvariants.runtime.fallback).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import reduce
from operator import xor

__all__ = ["SelectorSet"]

# Seed for the XOR fold so the empty set does not hash to 0 like many other
# objects do.
_EMPTY_HASH_SEED: int = 0x5E1EC7


class SelectorSet(Mapping[str, str]):
    """Immutable mapping of selector names to selector values.

    Equality is case-sensitive and independent of insertion order. Only
    another SelectorSet can compare equal; a plain dict with the same pairs
    does not.

    Example:
        >>> a = SelectorSet({"COUNT": "ONE", "GENDER": "FEMININE"})
        >>> b = SelectorSet.of(GENDER="FEMININE", COUNT="ONE")
        >>> a == b and hash(a) == hash(b)
        True
        >>> str(a)
        '{COUNT:ONE, GENDER:FEMININE}'
    """

    __slots__ = ("_hash", "_map")

    def __init__(
        self, values: Mapping[str, str] | Iterable[tuple[str, str]] = (), /
    ) -> None:
        """Build a selector set from a mapping or an iterable of pairs.

        Args:
            values: Selector name/value pairs. Later duplicates of a name
                replace earlier ones, as with dict().

        Raises:
            TypeError: If any name or value is not a string
        """
        pairs = dict(values)
        for name, value in pairs.items():
            if not isinstance(name, str) or not isinstance(value, str):
                msg = (
                    "Selector names and values must be str, got "
                    f"{type(name).__name__}: {type(value).__name__}"
                )
                raise TypeError(msg)
        self._map: dict[str, str] = pairs
        self._hash: int = reduce(
            xor, (hash(pair) for pair in pairs.items()), _EMPTY_HASH_SEED
        )

    @classmethod
    def of(cls, **pairs: str) -> SelectorSet:
        """Build a selector set from keyword arguments."""
        return cls(pairs)

    # Mapping protocol

    def __getitem__(self, name: str) -> str:
        return self._map[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, name: object) -> bool:
        return name in self._map

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorSet):
            return NotImplemented
        return self._hash == other._hash and self._map == other._map

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"SelectorSet({dict(self.sort_key())!r})"

    def __str__(self) -> str:
        entries = ", ".join(f"{name}:{value}" for name, value in self.sort_key())
        return f"{{{entries}}}"

    # Derivation

    def sort_key(self) -> tuple[tuple[str, str], ...]:
        """Return pairs sorted by name, for caller-imposed deterministic order."""
        return tuple(sorted(self._map.items()))

    def with_value(self, name: str, value: str) -> SelectorSet:
        """Return a copy with ``name`` set to ``value``."""
        updated = dict(self._map)
        updated[name] = value
        return SelectorSet(updated)

    def without(self, name: str) -> SelectorSet:
        """Return a copy with ``name`` removed (no error if absent)."""
        return SelectorSet(
            (key, value) for key, value in self._map.items() if key != name
        )
