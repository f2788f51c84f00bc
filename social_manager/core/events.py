"""Event system for Social Manager.

A small publish/subscribe bus standing in for the host's action hooks. The
resolver subscribes to ``init`` and resolves the theme declaration when the
host fires it.

Usage:
    bus = EventBus()
    bus.on("init", my_handler)
    bus.emit("init", {"theme": "twentyseventeen"})
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from ..utils.logging import get_logger

logger = get_logger(__name__)

EventHandler = Callable[..., None]

# Well-known event names
INIT = "init"


@dataclass
class Event:
    """An event that flows through the system."""

    name: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: str = ""


class EventBus:
    """Synchronous publish/subscribe bus."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._once_handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def on(self, event_name: str, handler: EventHandler) -> Callable[[], None]:
        """Subscribe to an event. Returns an unsubscribe function."""
        self._handlers[event_name].append(handler)

        def unsubscribe() -> None:
            try:
                self._handlers[event_name].remove(handler)
            except ValueError:
                pass

        return unsubscribe

    def once(self, event_name: str, handler: EventHandler) -> None:
        """Subscribe to an event; the handler fires once then auto-removes."""
        self._once_handlers[event_name].append(handler)

    def off(self, event_name: str, handler: EventHandler) -> None:
        """Unsubscribe a handler."""
        try:
            self._handlers[event_name].remove(handler)
        except ValueError:
            pass
        try:
            self._once_handlers[event_name].remove(handler)
        except ValueError:
            pass

    def emit(self, event_name: str, data: dict[str, Any] | None = None, source: str = "") -> Event:
        """Emit an event to all subscribers."""
        event = Event(name=event_name, data=data or {}, source=source)

        handlers = list(self._handlers.get(event_name, []))
        handlers += list(self._once_handlers.pop(event_name, []))

        # One bad handler must not keep the others from running
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    "Event handler error",
                    event_name=event_name,
                    handler=getattr(handler, "__name__", str(handler)),
                    error=str(e),
                    exc_info=True,
                )
        return event

    def handler_count(self, event_name: str | None = None) -> int:
        """Count registered handlers."""
        if event_name:
            return len(self._handlers.get(event_name, [])) + len(self._once_handlers.get(event_name, []))
        return sum(len(h) for h in self._handlers.values()) + sum(len(h) for h in self._once_handlers.values())

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        self._once_handlers.clear()


# Global singleton
_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get the global event bus singleton."""
    global _bus
    if _bus is None:
        _bus = EventBus()
    return _bus
