"""FFT modules for the DSP transform library."""

from .complex_fft import FFTConfig, fft_alloc, fft_execute
from .real_fft import rfft

__all__ = [
    'FFTConfig',
    'fft_alloc',
    'fft_execute',
    'rfft',
]
