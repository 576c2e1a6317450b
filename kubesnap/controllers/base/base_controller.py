"""Base controller with observer plumbing for the monitor.

Controllers own mutable state and publish immutable snapshots of it to
listeners. The presentation layer only ever reads those snapshots and issues
commands back.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")


class BaseController(ABC, Generic[StateT]):
    """Base controller class that publishes state snapshots.

    Subclasses should implement the abstract methods to provide
    specific refresh functionality.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[[StateT], None]] = []

    @property
    @abstractmethod
    def state(self) -> StateT:
        """Return the current immutable state snapshot."""
        ...

    @abstractmethod
    async def refresh(self, silent: bool = False) -> None:
        """Run one refresh cycle."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release timers and connections held by the controller."""
        ...

    def subscribe(self, listener: Callable[[StateT], None]) -> Callable[[], None]:
        """Register a listener for state snapshots.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, state: StateT) -> None:
        """Deliver a snapshot to every listener, isolating listener failures."""
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)
