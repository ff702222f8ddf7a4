"""Domain events and a dispatcher that delivers them to registered handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any


class HandlerAlreadyRegisteredError(Exception):
    """Raised when the same handler is registered twice for one event."""

    def __init__(self, message: str = "handler already registered") -> None:
        super().__init__(message)


@dataclass
class Event:
    """A named event carrying an arbitrary payload."""

    name: str
    payload: Any = None

    def date_time(self) -> datetime:
        return datetime.now()


@dataclass
class TransactionCreated(Event):
    name: str = "TransactionCreated"


@dataclass
class BalanceUpdated(Event):
    name: str = "BalanceUpdated"


class EventHandler(ABC):
    """Something that reacts to dispatched events."""

    @abstractmethod
    def handle(self, event: Event) -> None:
        """React to ``event``."""


class EventDispatcher:
    """Keeps handlers per event name and calls them, in registration order."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def register(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.setdefault(event_name, [])
        if any(h is handler for h in handlers):
            raise HandlerAlreadyRegisteredError()
        handlers.append(handler)

    def dispatch(self, event: Event) -> None:
        for handler in list(self._handlers.get(event.name, ())):
            handler.handle(event)

    def has(self, event_name: str, handler: EventHandler) -> bool:
        return any(h is handler for h in self._handlers.get(event_name, ()))

    def remove(self, event_name: str, handler: EventHandler) -> None:
        """Unregister ``handler``; does nothing if it was not registered."""
        handlers = self._handlers.get(event_name)
        if not handlers:
            return
        for position, registered in enumerate(handlers):
            if registered is handler:
                del handlers[position]
                return

    def clear(self) -> None:
        self._handlers = {}