"""Shared in-memory collection behavior for the roster services."""

from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Generic,
    Iterator,
    Optional,
    Protocol,
    TypeVar,
)

from rallybook.signals import CLEARED, DELETED

if TYPE_CHECKING:
    from blinker import NamedSignal
    from flask import Flask

logger = logging.getLogger(__name__)


class _Identified(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=_Identified)


class Registry(Generic[T]):
    """An insertion-ordered collection of records keyed by their ``id``.

    Subclasses set ``signal`` (the blinker signal sent after every successful
    mutation), ``extension_name`` (the key used in ``app.extensions``) and
    ``entity_name`` (used in log messages). All access is expected from a
    single thread; the check-then-mutate steps are not guarded.
    """

    signal: ClassVar[NamedSignal]
    extension_name: ClassVar[str]
    entity_name: ClassVar[str] = "record"

    def __init__(self, app: Optional[Flask] = None) -> None:
        self._items: list[T] = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Register this registry on a Flask application."""
        app.extensions[self.extension_name] = self

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __contains__(self, item: object) -> bool:
        item_id = getattr(item, "id", item)
        return self._index_of(item_id) != -1  # type: ignore[arg-type]

    def _snapshot(self) -> tuple[T, ...]:
        return tuple(self._items)

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return -1

    def get(self, item_id: str) -> Optional[T]:
        """Return the record with the given ID, or None."""
        index = self._index_of(item_id)
        return self._items[index] if index != -1 else None

    def delete(self, item_id: str) -> bool:
        """Delete a record by ID. Returns True if a record was removed."""
        index = self._index_of(item_id)
        if index == -1:
            logger.info(f"Delete skipped, no {self.entity_name} with id {item_id}")
            return False

        removed = self._items.pop(index)
        logger.info(f"Deleted {self.entity_name} {item_id}")
        self._notify(DELETED, **{self.entity_name: removed})
        return True

    def clear_all(self) -> None:
        """Remove every record."""
        removed = self._snapshot()
        self._items.clear()
        logger.info(f"Cleared {len(removed)} {self.entity_name} record(s)")
        self._notify(CLEARED, removed=removed)

    def connect(self, receiver: Callable[..., Any]) -> Callable[..., Any]:
        """Subscribe a receiver to this registry's change notifications.

        The receiver is called as ``receiver(sender, action=..., **payload)``
        and is held strongly, so lambdas and closures stay subscribed until
        ``disconnect`` is called.
        """
        return self.signal.connect(receiver, sender=self, weak=False)

    def disconnect(self, receiver: Callable[..., Any]) -> None:
        self.signal.disconnect(receiver, sender=self)

    def _notify(self, action: str, **payload: Any) -> None:
        self.signal.send(self, action=action, **payload)
