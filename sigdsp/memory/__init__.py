"""Memory allocation modules for the DSP transform library."""

from .allocator import DspAllocator

__all__ = [
    'DspAllocator',
]
