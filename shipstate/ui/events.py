"""
ui/events.py - Host event dispatch

Instance-scoped dispatcher carrying host notifications to the plugin:
- SELECTION_CHANGED: the map selection moved to another object
- LAUNCHER_READY: the application launcher accepts buttons

Dispatch is synchronous on the caller's thread. Handler failures are
logged and re-raised; an internal fault in a report build must surface.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
import logging

logger = logging.getLogger("ui.events")


class HostEventType(str, Enum):
    """Types of host events."""
    SELECTION_CHANGED = "selection_changed"
    LAUNCHER_READY = "launcher_ready"


@dataclass(frozen=True)
class HostEvent:
    """A host event with payload."""

    event_type: HostEventType
    payload: Any = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def selection_changed(cls, target) -> "HostEvent":
        """Create a selection changed event; target may be None."""
        return cls(event_type=HostEventType.SELECTION_CHANGED, payload=target)

    @classmethod
    def launcher_ready(cls, launcher) -> "HostEvent":
        """Create a launcher ready event carrying the launcher."""
        return cls(event_type=HostEventType.LAUNCHER_READY, payload=launcher)


# Type alias for event handlers
EventHandler = Callable[[HostEvent], None]


class EventDispatcher:
    """
    Synchronous event dispatcher.

    Usage:
        dispatcher = EventDispatcher()
        dispatcher.subscribe(HostEventType.SELECTION_CHANGED, handler)
        dispatcher.emit(HostEvent.selection_changed(target))
    """

    def __init__(self):
        self._handlers: Dict[HostEventType, List[EventHandler]] = {}

    def subscribe(self, event_type: HostEventType, handler: EventHandler) -> bool:
        """
        Subscribe to events of a specific type.

        Returns:
            True if the handler was added, False if already subscribed
        """
        handlers = self._handlers.setdefault(event_type, [])
        if handler in handlers:
            return False
        handlers.append(handler)
        logger.debug(f"Subscribed handler to {event_type.value}")
        return True

    def unsubscribe(self, event_type: HostEventType, handler: EventHandler) -> bool:
        """
        Unsubscribe from events of a specific type.

        Returns:
            True if handler was removed
        """
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug(f"Unsubscribed handler from {event_type.value}")
            return True
        return False

    def emit(self, event: HostEvent) -> None:
        """Deliver an event to every handler of its type, in subscription order."""
        logger.debug(f"Emitting {event.event_type.value}")

        # Copy: handlers may unsubscribe themselves while being called
        for handler in list(self._handlers.get(event.event_type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Handler failed for {event.event_type.value}: {e}")
                raise

    def handler_count(self, event_type: Optional[HostEventType] = None) -> int:
        """Number of handlers for one type, or across all types."""
        if event_type is not None:
            return len(self._handlers.get(event_type, []))
        return sum(len(handlers) for handlers in self._handlers.values())
