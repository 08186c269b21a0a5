"""Frame time step value."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Timestep:
    """A span of time measured in seconds."""

    time: float = 0.0

    @property
    def seconds(self) -> float:
        """The step in seconds."""
        return self.time

    @property
    def milliseconds(self) -> float:
        """The step in milliseconds."""
        return self.time * 1000.0

    def __float__(self) -> float:
        return float(self.time)