"""Lazily constructed, process-wide shared instances.

:class:`SingletonHolder` owns the check-and-create step behind a lock, so
concurrent first access still constructs exactly one instance. Prefer
passing instances explicitly; reach for a holder only where a single global
is genuinely required.

Contents:
    * :class:`SingletonHolder` - Thread-safe lazy holder around a factory.
    * :func:`get_greeter` - Process-wide :class:`~principles.domain.greeter.Greeter`.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from ..domain.greeter import Greeter

T = TypeVar("T")


class SingletonHolder(Generic[T]):
    """Create one instance on first request and hand it out afterwards.

    Uses double-checked locking: the fast path reads without the lock, the
    slow path re-checks under it before calling ``factory``.

    Args:
        factory: Zero-argument callable producing the shared instance.

    Example:
        >>> holder = SingletonHolder(list)
        >>> holder.get_instance() is holder.get_instance()
        True
        >>> holder.is_initialised()
        True
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._instance: T | None = None
        self._lock = threading.Lock()

    def get_instance(self) -> T:
        instance = self._instance
        if instance is None:
            with self._lock:
                instance = self._instance
                if instance is None:
                    instance = self._factory()
                    self._instance = instance
        return instance

    def is_initialised(self) -> bool:
        return self._instance is not None

    def reset(self) -> None:
        """Forget the current instance so the next request builds a new one.

        Testing helper. Not intended for use in the running app.
        """
        with self._lock:
            self._instance = None


_GREETER: SingletonHolder[Greeter] = SingletonHolder(Greeter)


def get_greeter() -> Greeter:
    """Return the process-wide greeter, creating it on first use.

    Example:
        >>> get_greeter() is get_greeter()
        True
    """
    return _GREETER.get_instance()


def greeter_holder() -> SingletonHolder[Greeter]:
    """Expose the holder behind :func:`get_greeter` (inspection and tests)."""
    return _GREETER


__all__ = ["SingletonHolder", "get_greeter", "greeter_holder"]
