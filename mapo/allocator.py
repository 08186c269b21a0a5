"""Address alignment helpers and a bump-pointer allocator over a byte buffer."""

from __future__ import annotations

from .log import get_engine_logger
from .uassert import ensure

MAX_SHIFT = 256


def _check_alignment(alignment: int) -> int:
    ensure(1 <= alignment <= 255, "Alignment must fit in one byte and be positive!")
    mask = alignment - 1
    ensure((alignment & mask) == 0, "Alignment is not power of two!")
    return mask


def align_address(address: int, alignment: int) -> int:
    """Round ``address`` up to the next multiple of ``alignment`` (a power of two)."""
    mask = _check_alignment(alignment)
    return (address + mask) & ~mask


def aligned_shift(address: int, alignment: int) -> int:
    """Return how far an over-allocated block at ``address`` is moved to align it.

    The block is always moved by at least one byte, so that the shift can be
    stored in the byte just before the aligned address.
    """
    aligned = align_address(address, alignment)
    if aligned == address:
        aligned += alignment
    shift = aligned - address
    ensure(0 < shift <= MAX_SHIFT, "Shift is too large!")
    return shift


def modulo_shift(address: int, alignment: int) -> int:
    """Return the shift that aligns ``address``, computed with the modulo operator."""
    ensure(alignment > 0, "Alignment must be positive!")
    shift = alignment - address % alignment
    ensure(0 < shift <= MAX_SHIFT, "Shift is too large!")
    return shift


class LinearAllocator:
    """Hands out consecutive regions of a fixed-size buffer until reset."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("allocator size must not be negative")
        self._memory = bytearray(size)
        self._current = 0

    @property
    def total_size(self) -> int:
        """Capacity of the buffer in bytes."""
        return len(self._memory)

    @property
    def used(self) -> int:
        """Number of bytes handed out since the last reset."""
        return self._current

    @property
    def buffer(self) -> memoryview:
        """Writable view of the whole underlying buffer."""
        return memoryview(self._memory)

    def allocate(self, size: int) -> int:
        """Reserve ``size`` bytes and return their offset in the buffer.

        Raises MemoryError when the remaining space is too small.
        """
        if size < 0:
            raise ValueError("allocation size must not be negative")
        if self._current + size > self.total_size:
            get_engine_logger().error("Failed to allocate %d bytes of memory!", size)
            raise MemoryError(f"Failed to allocate {size} bytes of memory!")
        offset = self._current
        self._current += size
        return offset

    def free(self, offset: int) -> None:
        """Check that ``offset`` lies in the handed-out region; memory is released only on reset."""
        ensure(0 <= offset <= self._current, "Offset was not handed out by this allocator!")

    def reset(self) -> None:
        """Make the whole buffer available again."""
        self._current = 0