"""Layers of application logic and the ordered stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator

from .events import Event
from .log import get_engine_logger
from .timestep import Timestep
from .uassert import ensure


class Layer:
    """A unit of application logic; subclasses override the hooks they need.

    The base hooks keep track of the layer's state: whether it is attached,
    the last frame time, how many frames it rendered and the last event seen.
    """

    def __init__(self, debug_name: str = "Layer") -> None:
        self.debug_name = debug_name
        self.attached = False
        self.last_dt: Timestep | None = None
        self.frames_rendered = 0
        self.last_event: Event | None = None

    def on_attach(self) -> None:
        """Called when the layer is added to an application."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed."""
        self.attached = False

    def on_update(self, dt: Timestep) -> None:
        """Called once per frame with the frame time."""
        self.last_dt = dt

    def on_imgui_render(self) -> None:
        """Called once per frame to draw user interface."""
        self.frames_rendered += 1

    def on_event(self, event: Event) -> None:
        """Called for each event not yet handled by a layer above."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.debug_name!r}>"


class LayerStack:
    """Layers in the first part of the list, overlays after them."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Add ``layer`` after the other layers and before the overlays."""
        ensure(self._find(layer) is None, "Same layer could not be added to stack twice!")
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def pop_layer(self, layer: Layer) -> None:
        """Remove ``layer``; logs a warning if it is not in the stack."""
        index = self._find(layer)
        if index is None:
            get_engine_logger().warning("The layer being popped is not present! Skip.")
            return
        del self._layers[index]
        self._insert_index -= 1

    def push_overlay(self, overlay: Layer) -> None:
        """Add ``overlay`` at the end of the stack."""
        ensure(self._find(overlay) is None, "Same overlay could not be added to stack twice!")
        self._layers.append(overlay)

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove ``overlay``; logs a warning if it is not in the stack."""
        index = self._find(overlay)
        if index is None:
            get_engine_logger().warning("The overlay being popped is not present! Skip.")
            return
        del self._layers[index]

    def clear(self) -> None:
        """Detach every layer in order and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)