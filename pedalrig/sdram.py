"""Bump allocator over a fixed block of single-precision samples."""

from __future__ import annotations

from functools import lru_cache

# 64 MiB of external memory, counted in 4-byte floats.
SDRAM_SIZE_F32 = 64 * 1024 * 1024 // 4

_FLOAT_BYTES = 4


class OutOfSDRAMError(MemoryError):
    """An allocation did not fit in the remaining memory."""


class StaticBuffer:
    """A fixed-size, zero-initialised block of float32 samples."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._bytes = bytearray(size * _FLOAT_BYTES)
        self._raw = memoryview(self._bytes)
        self._floats = self._raw.cast("f")

    def __len__(self) -> int:
        return len(self._floats)

    def view(self, start: int, stop: int) -> memoryview:
        """A writable float view of samples start..stop."""
        return self._floats[start:stop]

    def zero(self, start: int, stop: int) -> None:
        count = (stop - start) * _FLOAT_BYTES
        self._raw[start * _FLOAT_BYTES : stop * _FLOAT_BYTES] = bytes(count)


@lru_cache(maxsize=None)
def _shared_buffer() -> StaticBuffer:
    return StaticBuffer(SDRAM_SIZE_F32)


class SDRAM:
    """Hands out consecutive, zeroed slices of a buffer.

    Every SDRAM made without an explicit buffer shares one memory block, so
    separate allocators alias each other; nothing protects against that.
    """

    def __init__(self, buffer: StaticBuffer | None = None) -> None:
        self._buffer = buffer if buffer is not None else _shared_buffer()
        self._sofar = 0

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def allocated(self) -> int:
        return self._sofar

    def alloc(self, num_floats: int) -> memoryview:
        """Reserve num_floats samples, zero them and return a view of them."""
        if num_floats < 0:
            raise ValueError("num_floats must not be negative")
        new_sofar = self._sofar + num_floats
        if new_sofar > len(self._buffer):
            raise OutOfSDRAMError(
                f"Out of SDRAM! (already allocated {self._sofar}, "
                f"new allocation {num_floats})"
            )
        self._buffer.zero(self._sofar, new_sofar)
        view = self._buffer.view(self._sofar, new_sofar)
        self._sofar = new_sofar
        return view