"""Real-input forward FFT."""

from contextlib import ExitStack

import numpy as np

from ..constants import OK, OUT_OF_MEMORY, BUFFER_SIZE_MISMATCH, PARAMETER_INVALID
from ..memory import DspAllocator
from .complex_fft import fft_alloc


def rfft(src: np.ndarray, src_size: int, output: np.ndarray, output_size: int,
         n_fft: int, allocator: DspAllocator = None) -> int:
    """
    Compute the non-redundant half of the FFT of a real signal.

    The input is truncated or zero-padded to n_fft samples. Only the
    n_fft // 2 + 1 non-negative frequency bins are produced; the rest
    follow from conjugate symmetry.

    Args:
        src: Real input samples
        src_size: Number of valid samples in src
        output: Complex output buffer
        output_size: Number of bins to write, must be n_fft // 2 + 1
        n_fft: FFT length
        allocator: Allocator for scratch memory (None = private allocator)

    Returns:
        OK, OUT_OF_MEMORY, BUFFER_SIZE_MISMATCH or PARAMETER_INVALID
    """
    if n_fft < 1 or src_size < 0:
        return PARAMETER_INVALID
    if output_size != n_fft // 2 + 1 or output.shape[0] < output_size:
        return BUFFER_SIZE_MISMATCH

    if allocator is None:
        allocator = DspAllocator()

    with ExitStack() as scope:
        if src_size < n_fft:
            padded = allocator.calloc(n_fft, src.dtype)
            if padded is None:
                return OUT_OF_MEMORY
            scope.callback(allocator.free, padded, padded.nbytes)
            padded[:src_size] = src[:src_size]
            fft_input = padded
        else:
            fft_input = src[:n_fft]

        cfg = fft_alloc(n_fft)
        if not allocator.register_alloc(cfg, cfg.mem_length):
            return OUT_OF_MEMORY
        scope.callback(allocator.free, cfg, cfg.mem_length)

        output[:output_size] = np.fft.rfft(fft_input, n=n_fft)

    return OK
