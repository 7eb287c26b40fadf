"""
Event bus for engine-to-view communication.

Provides a pub/sub pattern so the engine stays unaware of its views.
Each game session owns its own bus; dispatch is synchronous.
"""

import logging
from collections import defaultdict
from collections.abc import Callable

from .events import Event, EventType


logger = logging.getLogger(__name__)


class EventBus:
    """
    Simple synchronous pub/sub event bus.

    Usage:
        bus = EventBus()
        bus.subscribe(EventType.PIECE_PLACED, my_handler)
        bus.publish(Event(type=EventType.PIECE_PLACED, data=move))
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType, list[Callable[[Event], None]]] = defaultdict(
            list
        )

    def subscribe(
        self, event_type: EventType, handler: Callable[[Event], None]
    ) -> None:
        """Register a handler for an event type."""
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: Callable[[Event], None]) -> None:
        """Register a handler for every event type."""
        for event_type in EventType:
            self.subscribe(event_type, handler)

    def publish(self, event: Event) -> None:
        """Dispatch the event to every handler."""
        for handler in self._handlers[event.type].copy():
            try:
                handler(event)
            except Exception:
                logger.exception("Handler error for %s", event.type.name)

