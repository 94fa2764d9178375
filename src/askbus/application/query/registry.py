"""Keyed subscriber storage for the three aggregation families."""
from __future__ import annotations

import contextlib
import inspect
import threading
from typing import Any, ContextManager, Hashable

from askbus.application.query.answers import Answerer
from askbus.application.query.keys import Family, QueryKey


class Subscription:
    """Handle returned by ``subscribe``; cancelling it unsubscribes the answerer.

    Usable as a context manager::

        with bus.subscribe_bool("can_jump", grounded):
            assert bus.or_("can_jump", player)
    """

    __slots__ = ("_registry", "family", "key", "answerer")

    def __init__(self, registry: "QueryRegistry", family: Family, key: QueryKey, answerer: Answerer) -> None:
        self._registry = registry
        self.family = family
        self.key = key
        self.answerer = answerer

    @property
    def active(self) -> bool:
        return self._registry.is_subscribed(self.family, self.key, self.answerer)

    def cancel(self) -> None:
        self._registry.remove(self.family, self.key, self.answerer)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()

    def __repr__(self) -> str:
        return f"Subscription({self.family.value}, {self.key})"


def answerer_identity(answerer: Answerer) -> Hashable:
    """Dedup token for *answerer*: its object identity.

    A bound method is identified by its instance and function, so
    ``unit.answer`` taken twice from the same ``unit`` is one answerer.
    Equality and hashing of the callable are never consulted.
    """
    if inspect.ismethod(answerer):
        return (id(answerer.__self__), id(answerer.__func__))
    return id(answerer)


class SubscriberCollection:
    """Maps each :class:`QueryKey` to an insertion-ordered set of answerers.

    Answerers are deduplicated by :func:`answerer_identity`: the same
    function object (or a bound method of the same instance) collapses to
    one entry, while two separately built callables stay distinct even when
    they compare equal. Unhashable callables are accepted.
    """

    def __init__(self, thread_safe: bool = True) -> None:
        # the stored callable keeps every id() in the token alive
        self._subscribers: dict[QueryKey, dict[Hashable, Answerer]] = {}
        self._lock: ContextManager[Any] = threading.RLock() if thread_safe else contextlib.nullcontext()

    def add(self, key: QueryKey, answerer: Answerer) -> bool:
        """Insert *answerer*; return ``False`` when it was already present."""
        token = answerer_identity(answerer)
        with self._lock:
            answerers = self._subscribers.setdefault(key, {})
            if token in answerers:
                return False
            answerers[token] = answerer
            return True

    def remove(self, key: QueryKey, answerer: Answerer) -> bool:
        """Drop *answerer*; return ``False`` when there was nothing to remove."""
        token = answerer_identity(answerer)
        with self._lock:
            answerers = self._subscribers.get(key)
            if answerers is None or token not in answerers:
                return False
            del answerers[token]
            if not answerers:
                del self._subscribers[key]
            return True

    def snapshot(self, key: QueryKey) -> tuple[Answerer, ...]:
        """Answerers for *key* at this instant, safe to iterate while others mutate."""
        with self._lock:
            answerers = self._subscribers.get(key)
            return tuple(answerers.values()) if answerers else ()

    def contains(self, key: QueryKey, answerer: Answerer) -> bool:
        token = answerer_identity(answerer)
        with self._lock:
            return token in self._subscribers.get(key, ())

    def count(self, key: QueryKey) -> int:
        with self._lock:
            return len(self._subscribers.get(key, ()))

    def clear(self) -> None:
        with self._lock:
            self._subscribers.clear()

    def __len__(self) -> int:
        with self._lock:
            return sum(len(a) for a in self._subscribers.values())


class QueryRegistry:
    """Owns one :class:`SubscriberCollection` per :class:`Family`."""

    def __init__(self, thread_safe: bool = True) -> None:
        self._collections: dict[Family, SubscriberCollection] = {
            family: SubscriberCollection(thread_safe) for family in Family
        }

    def collection(self, family: Family) -> SubscriberCollection:
        return self._collections[family]

    def add(self, family: Family, key: QueryKey, answerer: Answerer) -> Subscription:
        self._collections[family].add(key, answerer)
        return Subscription(self, family, key, answerer)

    def remove(self, family: Family, key: QueryKey, answerer: Answerer) -> bool:
        return self._collections[family].remove(key, answerer)

    def snapshot(self, family: Family, key: QueryKey) -> tuple[Answerer, ...]:
        return self._collections[family].snapshot(key)

    def is_subscribed(self, family: Family, key: QueryKey, answerer: Answerer) -> bool:
        return self._collections[family].contains(key, answerer)

    def count(self, family: Family, key: QueryKey) -> int:
        return self._collections[family].count(key)

    def clear(self) -> None:
        for collection in self._collections.values():
            collection.clear()


__all__ = ["QueryRegistry", "SubscriberCollection", "Subscription", "answerer_identity"]
