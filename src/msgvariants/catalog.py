"""MessageCatalog - registry owning global id uniqueness.

Messages and groups do not check that their ids are unique; that is a
cross-cutting invariant held here. A catalog has an explicit lifecycle:
create it, register entries, and close it (or leave its ``with`` block)
to drop everything it holds.

Python 3.13+.
"""

import logging
from collections.abc import Iterator

from msgvariants.diagnostics import DuplicateIdError, ErrorTemplate
from msgvariants.locale_utils import normalize_locale
from msgvariants.model import Message, MessageEntry, MessageGroup
from msgvariants.runtime.rwlock import RWLock

__all__ = ["MessageCatalog"]

logger = logging.getLogger(__name__)


class MessageCatalog:
    """Session-wide registry of messages and message groups.

    A registered group claims its own id and the id of every variant it
    holds at registration time. All claims are checked before anything is
    stored, so a rejected registration leaves the catalog unchanged. Grow a
    registered group with insert(), which checks and claims each new
    variant id.

    Thread Safety:
        register(), insert(), unregister() and clear() take the write
        lock; lookups take the read lock. insert() holds the catalog lock
        while it takes the group's, never the reverse.

    Examples:
        >>> with MessageCatalog() as catalog:
        ...     catalog.register(items_group)
        ...     catalog.get("items") is items_group
        True
        >>> len(catalog)
        0
    """

    __slots__ = ("_claims", "_entries", "_lock")

    def __init__(self) -> None:
        # Top-level entries by id
        self._entries: dict[str, MessageEntry] = {}
        # Every claimed id (entries and group variants) -> owning entry id
        self._claims: dict[str, str] = {}
        self._lock = RWLock()

    def __enter__(self) -> "MessageCatalog":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Exit context manager, clearing the registry.

        Does not suppress exceptions.
        """
        self.close()

    def close(self) -> None:
        """Release every registered entry."""
        with self._lock.write():
            count = len(self._entries)
            self._entries.clear()
            self._claims.clear()
        logger.debug("MessageCatalog closed, released %d entries", count)

    def register(self, entry: MessageEntry) -> None:
        """Register a message or a message group.

        Args:
            entry: Message or MessageGroup to register

        Raises:
            TypeError: If entry is neither a Message nor a MessageGroup
            DuplicateIdError: If the entry id, or the id of any variant in
                a group, is already claimed
        """
        ids = self._claimed_ids(entry)
        with self._lock.write():
            for entry_id in ids:
                if entry_id in self._claims:
                    raise DuplicateIdError(
                        ErrorTemplate.duplicate_id(entry_id), entry_id=entry_id
                    )
            self._entries[entry.id] = entry
            for entry_id in ids:
                self._claims[entry_id] = entry.id

        logger.debug("Registered %s '%s'", type(entry).__name__, entry.id)

    def insert(self, group_id: str, message: Message) -> None:
        """Add a variant to a registered group and claim its id.

        A group claims variant ids when it is registered. Variants added
        afterwards must go through this method; MessageGroup.insert() alone
        never consults a catalog.

        Args:
            group_id: Id of a registered MessageGroup
            message: Variant to add

        Raises:
            KeyError: If no entry is registered under group_id
            TypeError: If message is not a Message, or group_id names a Message
            DuplicateIdError: If message.id is already claimed
            DuplicateVariantError: If the group already has a variant for
                message.selector_values (no id is claimed)
        """
        if not Message.guard(message):
            msg = f"Catalog inserts accept Message variants, got {type(message).__name__}"
            raise TypeError(msg)

        with self._lock.write():
            group = self._entries[group_id]
            if not MessageGroup.guard(group):
                msg = f"Catalog entry '{group_id}' is a Message, not a MessageGroup"
                raise TypeError(msg)
            if message.id in self._claims:
                raise DuplicateIdError(
                    ErrorTemplate.duplicate_id(message.id), entry_id=message.id
                )
            group.insert(message)
            self._claims[message.id] = group_id

        logger.debug("Inserted '%s' into group '%s'", message.id, group_id)

    @staticmethod
    def _claimed_ids(entry: MessageEntry) -> tuple[str, ...]:
        if Message.guard(entry):
            return (entry.id,)
        if MessageGroup.guard(entry):
            ids = [entry.id]
            ids.extend(message.id for message in entry.sorted_variants())
            if len(set(ids)) != len(ids):
                duplicate = next(i for i in ids if ids.count(i) > 1)
                raise DuplicateIdError(
                    ErrorTemplate.duplicate_id(duplicate), entry_id=duplicate
                )
            return tuple(ids)
        msg = f"Catalog entries must be Message or MessageGroup, got {type(entry).__name__}"
        raise TypeError(msg)

    def unregister(self, entry_id: str) -> MessageEntry:
        """Remove a top-level entry and release all ids it claimed.

        Raises:
            KeyError: If no top-level entry has this id
        """
        with self._lock.write():
            entry = self._entries.pop(entry_id)
            released = [k for k, owner in self._claims.items() if owner == entry_id]
            for claimed in released:
                del self._claims[claimed]

        logger.debug("Unregistered '%s' (%d ids released)", entry_id, len(released))
        return entry

    def clear(self) -> None:
        with self._lock.write():
            self._entries.clear()
            self._claims.clear()

    def get(self, entry_id: str) -> MessageEntry | None:
        """Top-level entry by id, or None."""
        with self._lock.read():
            return self._entries.get(entry_id)

    def owner_of(self, message_id: str) -> str | None:
        """Id of the top-level entry that claimed ``message_id``, or None."""
        with self._lock.read():
            return self._claims.get(message_id)

    def ids(self) -> tuple[str, ...]:
        """Sorted ids of top-level entries."""
        with self._lock.read():
            return tuple(sorted(self._entries))

    def messages_for_locale(self, locale: str) -> tuple[Message, ...]:
        """Every registered message (group variants included) in ``locale``.

        Locales compare after BCP-47 to POSIX normalization, so "pt-BR"
        matches "pt_BR". Results are sorted by message id.
        """
        wanted = normalize_locale(locale)
        with self._lock.read():
            entries = tuple(self._entries.values())

        found: list[Message] = []
        for entry in entries:
            variants = (entry,) if Message.guard(entry) else entry.sorted_variants()
            found.extend(m for m in variants if normalize_locale(m.locale) == wanted)
        found.sort(key=lambda message: message.id)
        return tuple(found)

    def __contains__(self, entry_id: object) -> bool:
        with self._lock.read():
            return entry_id in self._entries

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def __iter__(self) -> Iterator[MessageEntry]:
        with self._lock.read():
            snapshot = tuple(self._entries[k] for k in sorted(self._entries))
        return iter(snapshot)
