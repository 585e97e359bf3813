"""I/O modules for the DSP transform library."""

from .signal_reader import read_signal
from .signal_writer import write_signal

__all__ = [
    'read_signal',
    'write_signal',
]
