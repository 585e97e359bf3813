"""Fallible buffer allocator with byte accounting."""

import threading
import numpy as np
from typing import Iterable, Optional


class DspAllocator:
    """
    Zero-initialized buffer allocator that can refuse requests.

    Every successful request is accounted in bytes until it is freed.
    A request is refused when it would push the bytes in use above
    ``limit``, or when its 1-based request number is listed in
    ``fail_at`` (used to simulate allocation failure at a given call site).

    Externally created objects (e.g. FFT plans) are accounted through
    ``register_alloc`` and released through ``free`` like any buffer.
    """

    def __init__(self, limit: Optional[int] = None,
                 fail_at: Optional[Iterable[int]] = None):
        """
        Initialize allocator.

        Args:
            limit: Maximum bytes in use at any time (None = unlimited)
            fail_at: Request numbers (1-based) that must be refused
        """
        self.limit = limit
        self.fail_at = set(fail_at) if fail_at is not None else set()
        self.requests = 0
        self.memory_in_use = 0
        self.peak_memory_in_use = 0
        self._live = {}
        self._lock = threading.Lock()

    @property
    def live_allocations(self) -> int:
        """Number of buffers and handles not yet freed."""
        with self._lock:
            return len(self._live)

    def _reserve(self, size: int, make):
        """Admit a request of size bytes and track the object make() returns."""
        with self._lock:
            self.requests += 1
            if self.requests in self.fail_at:
                return None
            if self.limit is not None and self.memory_in_use + size > self.limit:
                return None

            obj = make()
            self._live[id(obj)] = (obj, size)
            self.memory_in_use += size
            self.peak_memory_in_use = max(self.peak_memory_in_use, self.memory_in_use)
            return obj

    def calloc(self, count: int, dtype) -> Optional[np.ndarray]:
        """
        Allocate a zero-filled 1D buffer.

        Args:
            count: Number of elements
            dtype: numpy dtype of the elements

        Returns:
            The buffer, or None if the request was refused
        """
        size = count * np.dtype(dtype).itemsize
        return self._reserve(size, lambda: np.zeros(count, dtype=dtype))

    def register_alloc(self, handle, size: int) -> bool:
        """
        Account for an object allocated outside this allocator.

        Returns:
            True if the handle is now accounted, False if refused
        """
        return self._reserve(size, lambda: handle) is not None

    def free(self, obj, size: int) -> None:
        """
        Release a buffer from calloc or a handle from register_alloc.

        Raises:
            ValueError: If obj is not live (double free) or size differs
        """
        with self._lock:
            entry = self._live.get(id(obj))
            if entry is None or entry[0] is not obj:
                raise ValueError("Freeing an object that is not allocated")
            if entry[1] != size:
                raise ValueError(f"Free size mismatch: allocated {entry[1]} bytes, freeing {size}")

            del self._live[id(obj)]
            self.memory_in_use -= size
