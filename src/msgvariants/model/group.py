"""MessageGroup: variants of one logical message keyed by SelectorSet.

Thread Safety:
    insert() takes the write lock: the duplicate check and the store happen
    atomically and exclude concurrent resolvers. resolve() and every other
    read takes the shared read lock, so resolvers never observe a partially
    updated mapping and may run concurrently with each other.

Python 3.13+.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeIs

from msgvariants.constants import LOG_TRUNCATE_DEBUG
from msgvariants.diagnostics import (
    DuplicateVariantError,
    ErrorTemplate,
    NoVariantFoundError,
)
from msgvariants.model.message import Message
from msgvariants.model.selectors import SelectorSet
from msgvariants.runtime.fallback import DEFAULT_FALLBACK, FallbackPolicy
from msgvariants.runtime.rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

__all__ = ["MessageGroup"]

logger = logging.getLogger(__name__)


class MessageGroup:
    """One logical message across all its plural, gender and custom variants.

    Each variant is a Message stored under its own ``selector_values``.
    Within a group no two variants share an equal SelectorSet; a colliding
    insert raises DuplicateVariantError and leaves the first variant in
    place.

    Resolution is exact by default. A FallbackPolicy, given at construction
    or per call, enables the documented catch-all walk (see
    msgvariants.runtime.fallback).

    Iteration order is unspecified. Use sorted_variants() when output must
    be deterministic.

    A group knows nothing about id registries. Once registered in a
    MessageCatalog, extend it with MessageCatalog.insert() so new variant
    ids are checked.

    Example:
        >>> group = MessageGroup("items", fallback=FallbackPolicy())
        >>> group.insert(Message("items-one", "en",
        ...     Pattern.of(Placeholder("COUNT"), " item selected."),
        ...     SelectorSet.of(COUNT="ONE")))
        >>> group.insert(Message("items-other", "en",
        ...     Pattern.of(Placeholder("COUNT"), " items selected."),
        ...     SelectorSet.of(COUNT="OTHER")))
        >>> group.resolve(SelectorSet.of(COUNT="FEW")).id
        'items-other'
    """

    __slots__ = ("_fallback", "_id", "_lock", "_variants")

    def __init__(self, id: str, *, fallback: FallbackPolicy | None = None) -> None:  # noqa: A002
        """Create an empty group.

        Args:
            id: Group identifier
            fallback: Default fallback policy for resolve(); None resolves
                exact matches only

        Raises:
            ValueError: If id is empty
        """
        if not isinstance(id, str) or not id:
            msg = "MessageGroup id must be a non-empty string"
            raise ValueError(msg)
        self._id = id
        self._fallback = fallback
        self._variants: dict[SelectorSet, Message] = {}
        self._lock = RWLock()

    @classmethod
    def from_messages(
        cls,
        id: str,  # noqa: A002
        messages: Iterable[Message],
        *,
        fallback: FallbackPolicy | None = None,
    ) -> MessageGroup:
        """Build a group by inserting each message in order.

        Raises:
            DuplicateVariantError: On the first colliding selector set
        """
        group = cls(id, fallback=fallback)
        for message in messages:
            group.insert(message)
        return group

    @staticmethod
    def guard(entry: object) -> TypeIs[MessageGroup]:
        """Type guard for MessageGroup (used in entry filtering)."""
        return isinstance(entry, MessageGroup)

    @property
    def id(self) -> str:
        return self._id

    @property
    def fallback(self) -> FallbackPolicy | None:
        """Default fallback policy, or None for exact-only resolution."""
        return self._fallback

    @property
    def variants(self) -> Mapping[SelectorSet, Message]:
        """Read-only snapshot of the variant mapping."""
        with self._lock.read():
            return MappingProxyType(dict(self._variants))

    def insert(self, message: Message) -> None:
        """Add a variant keyed by ``message.selector_values``.

        Args:
            message: Variant to add

        Raises:
            TypeError: If message is not a Message
            DuplicateVariantError: If an equal key is already registered.
                The existing variant is kept.
        """
        if not Message.guard(message):
            msg = f"MessageGroup accepts Message variants, got {type(message).__name__}"
            raise TypeError(msg)

        key = message.selector_values
        with self._lock.write():
            if key in self._variants:
                raise DuplicateVariantError(
                    ErrorTemplate.duplicate_variant(self._id, str(key)),
                    group_id=self._id,
                    selector_values=key,
                )
            self._variants[key] = message

        logger.debug(
            "Group '%s': inserted variant %s (%s): %s",
            self._id,
            key,
            message.id,
            repr(str(message.pattern)[:LOG_TRUNCATE_DEBUG]),
        )

    def resolve(
        self,
        query: SelectorSet,
        *,
        fallback: FallbackPolicy | bool | None = None,
    ) -> Message:
        """Select the variant answering ``query``.

        Args:
            query: Runtime selector values (e.g., a computed plural category)
            fallback: None uses the group's policy; False forces exact
                matching; True uses DEFAULT_FALLBACK; a FallbackPolicy is
                used as given for this call only

        Returns:
            The exact match, or the first registered fallback candidate

        Raises:
            TypeError: If query is not a SelectorSet
            NoVariantFoundError: If neither the query nor any candidate
                has a registered variant
        """
        if not isinstance(query, SelectorSet):
            msg = f"resolve() expects a SelectorSet query, got {type(query).__name__}"
            raise TypeError(msg)

        policy = self._select_policy(fallback)
        with self._lock.read():
            exact = self._variants.get(query)
            if exact is not None:
                return exact
            if policy is None:
                tried: tuple[SelectorSet, ...] = (query,)
            else:
                tried_list: list[SelectorSet] = []
                for candidate in policy.candidates(query):
                    tried_list.append(candidate)
                    found = self._variants.get(candidate)
                    if found is not None:
                        logger.debug(
                            "Group '%s': %s resolved via fallback %s",
                            self._id,
                            query,
                            candidate,
                        )
                        return found
                tried = tuple(tried_list)

        raise NoVariantFoundError(
            ErrorTemplate.no_variant_found(
                self._id, str(query), [str(candidate) for candidate in tried]
            ),
            group_id=self._id,
            query=query,
            tried=tried,
        )

    def candidates(self, query: SelectorSet) -> tuple[SelectorSet, ...]:
        """Selector sets resolve() would try for ``query``, in order.

        Uses the group's default policy; exact-only groups yield just the
        query.
        """
        if self._fallback is None:
            return (query,)
        return tuple(self._fallback.candidates(query))

    def _select_policy(self, fallback: FallbackPolicy | bool | None) -> FallbackPolicy | None:
        if fallback is None:
            return self._fallback
        if fallback is True:
            return DEFAULT_FALLBACK
        if fallback is False:
            return None
        if isinstance(fallback, FallbackPolicy):
            return fallback
        msg = f"fallback must be a FallbackPolicy, bool or None, got {type(fallback).__name__}"
        raise TypeError(msg)

    def get(self, key: SelectorSet) -> Message | None:
        """Exact lookup without fallback; None if absent."""
        with self._lock.read():
            return self._variants.get(key)

    def keys(self) -> tuple[SelectorSet, ...]:
        """Snapshot of variant keys in unspecified order."""
        with self._lock.read():
            return tuple(self._variants)

    def sorted_variants(self) -> tuple[Message, ...]:
        """Variants ordered by SelectorSet.sort_key(), for stable output."""
        with self._lock.read():
            items = list(self._variants.items())
        items.sort(key=lambda item: item[0].sort_key())
        return tuple(message for _, message in items)

    @property
    def locales(self) -> frozenset[str]:
        """Distinct locales across all variants."""
        with self._lock.read():
            return frozenset(message.locale for message in self._variants.values())

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._variants

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._variants)

    def __iter__(self) -> Iterator[Message]:
        with self._lock.read():
            snapshot = tuple(self._variants.values())
        return iter(snapshot)

    def __repr__(self) -> str:
        return f"MessageGroup(id={self._id!r}, variants={len(self)})"

    def __str__(self) -> str:
        lines = [f"{self._id}: {{"]
        lines.extend(
            f"  {message.selector_values}: {message}" for message in self.sorted_variants()
        )
        lines.append("}")
        return "\n".join(lines)
