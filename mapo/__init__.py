"""Game engine building blocks: events, layers, timing, math, names, allocation, logging and meshes."""

__version__ = "0.1.0"