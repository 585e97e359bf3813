"""Complex FFT with an explicit, length-specific plan."""

import numpy as np
from typing import Optional

from ..constants import FFT_STATE_HEADER_BYTES, COMPLEX_SLOT_BYTES


class FFTConfig:
    """
    Plan for a complex FFT of a fixed length.

    The plan is created by fft_alloc and owned by the caller, which
    accounts ``mem_length`` bytes for it while it is alive.
    """

    def __init__(self, nfft: int, inverse_fft: bool = False):
        self.nfft = nfft
        self.inverse_fft = inverse_fft
        self.mem_length = FFT_STATE_HEADER_BYTES + nfft * COMPLEX_SLOT_BYTES

    def __repr__(self):
        direction = 'inverse' if self.inverse_fft else 'forward'
        return f"FFTConfig(nfft={self.nfft}, {direction}, mem_length={self.mem_length})"


def fft_alloc(nfft: int, inverse_fft: bool = False) -> Optional[FFTConfig]:
    """
    Create an FFT plan.

    Args:
        nfft: Transform length
        inverse_fft: If True, the plan computes the unnormalized inverse FFT

    Returns:
        The plan, or None if nfft is not a valid length
    """
    if nfft < 1:
        return None
    return FFTConfig(nfft, inverse_fft)


def fft_execute(cfg: FFTConfig, fin: np.ndarray, fout: np.ndarray) -> None:
    """
    Run the planned FFT of fin[:nfft] into fout[:nfft].

    Forward:  X[k] = sum_n x[n] * exp(-2j*pi*k*n/N)
    Inverse:  x[n] = sum_k X[k] * exp(+2j*pi*k*n/N)   (no 1/N factor)

    Raises:
        ValueError: If either buffer is shorter than the plan
    """
    n = cfg.nfft
    if fin.shape[0] < n or fout.shape[0] < n:
        raise ValueError(f"FFT buffers too short for plan of length {n}: "
                         f"got {fin.shape[0]} in, {fout.shape[0]} out")

    if cfg.inverse_fft:
        fout[:n] = np.fft.ifft(fin[:n], norm='forward')
    else:
        fout[:n] = np.fft.fft(fin[:n])
