"""Change notification for axis settings.

A host application subscribes to an axis's EventBus to learn when a setting
changed and the chart needs a redraw. Components subscribe to events and
receive callbacks when those events are emitted.
"""

from enum import Enum
from typing import Callable

from loguru import logger


class AxisEvent(Enum):
    """Enumeration of all axis event types."""

    AXIS_CHANGED = "axis_changed"  # a style or behaviour setting changed
    RANGE_CHANGED = "range_changed"  # visible time range changed


class EventBus:
    """Simple publish-subscribe event bus for axis change notification.

    Usage:
        bus = EventBus()
        bus.subscribe(AxisEvent.AXIS_CHANGED, lambda **kw: redraw())
        bus.emit(AxisEvent.AXIS_CHANGED, setting="label_position")

    Thread Safety:
        This implementation is NOT thread-safe. Subscriptions and emissions
        should happen on the thread that owns the rendering surface.
    """

    def __init__(self):
        self._subscribers: dict[AxisEvent, list[Callable]] = {}

    def subscribe(self, event_type: AxisEvent, callback: Callable) -> Callable:
        """Subscribe to an event type.

        Args:
            event_type: Event to listen for
            callback: Function to call when event is emitted. Receives **kwargs.

        Returns:
            The callback function (for easy unsubscribe later)
        """
        self._subscribers.setdefault(event_type, []).append(callback)
        return callback

    def unsubscribe(self, event_type: AxisEvent, callback: Callable) -> None:
        """Unsubscribe a callback from an event type."""
        if event_type in self._subscribers:
            self._subscribers[event_type] = [
                cb for cb in self._subscribers[event_type] if cb != callback
            ]

    def emit(self, event_type: AxisEvent, **kwargs) -> None:
        """Emit an event to all subscribers.

        Callback exceptions propagate to the caller; a failing listener
        stops delivery to the listeners after it.

        Args:
            event_type: Event to emit
            **kwargs: Data to pass to subscribers
        """
        callbacks = self._subscribers.get(event_type, [])
        if callbacks:
            logger.debug(f"Emitting {event_type.value} to {len(callbacks)} subscriber(s)")
        for callback in list(callbacks):
            callback(**kwargs)

    def clear(self, event_type: AxisEvent | None = None) -> None:
        """Clear all subscribers for an event type, or all events if None."""
        if event_type is None:
            self._subscribers.clear()
        elif event_type in self._subscribers:
            self._subscribers[event_type].clear()

    def has_subscribers(self, event_type: AxisEvent) -> bool:
        """Check if an event type has any subscribers."""
        return bool(self._subscribers.get(event_type))
