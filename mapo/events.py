"""Window, application, keyboard and mouse events and their dispatcher."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Callable, ClassVar, TypeVar


class EventType(Enum):
    """Every kind of event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(IntFlag):
    """Bit flags grouping event types."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _number(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events; ``handled`` is set once a handler consumes it."""

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = "None"
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    def in_category(self, category: EventCategory) -> bool:
        """Whether this event belongs to ``category``."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    name = "WindowResize"
    category_flags = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"{self.name}: {self.width} x {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    name = "WindowClose"
    category_flags = EventCategory.APPLICATION


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    name = "AppTick"
    category_flags = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    name = "AppUpdate"
    category_flags = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    name = "AppRender"
    category_flags = EventCategory.APPLICATION


class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code

    def __str__(self) -> str:
        return f"{self.name}: {int(self.key_code)}"


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED
    name = "KeyPressed"

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"{self.name}: {int(self.key_code)} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED
    name = "KeyReleased"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED
    name = "KeyTyped"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    name = "MouseMoved"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"{self.name}: {_number(self.x)}, {_number(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    name = "MouseScrolled"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, offset_x: float, offset_y: float) -> None:
        super().__init__()
        self.offset_x = offset_x
        self.offset_y = offset_y

    def __str__(self) -> str:
        return f"{self.name}: {_number(self.offset_x)}, {_number(self.offset_y)}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags = EventCategory.MOUSE_BUTTON | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button

    def __str__(self) -> str:
        return f"{self.name}: {int(self.button)}"


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED
    name = "MouseButtonReleased"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers registered for its type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], handler: Callable[[E], bool]) -> bool:
        """Call ``handler`` if the event is of ``event_class``'s type.

        The event is marked handled when the handler returns true. Returns
        whether the handler was called.
        """
        if self.event.event_type == event_class.event_type:
            self.event.handled |= bool(handler(self.event))  # type: ignore[arg-type]
            return True
        return False