"""Fast DCT-II / DCT-III computed through an FFT of the same length."""

from contextlib import ExitStack

import numpy as np

from ..constants import OK, OUT_OF_MEMORY, SIGNAL_SIZE_MISMATCH, PARAMETER_INVALID
from ..memory import DspAllocator
from ..fft import rfft, fft_alloc, fft_execute


def _check_vector(vector, length: int) -> int:
    """Validate an in-place transform target."""
    if not isinstance(vector, np.ndarray) or vector.ndim != 1:
        return PARAMETER_INVALID
    if not np.issubdtype(vector.dtype, np.floating) or not vector.flags.writeable:
        return PARAMETER_INVALID
    if length < 0 or length > vector.shape[0]:
        return SIGNAL_SIZE_MISMATCH
    return OK


def _working_dtypes(vector: np.ndarray):
    """Real and complex scratch dtypes matching the vector's precision."""
    if vector.dtype.itemsize <= 4:
        return np.float32, np.complex64
    return np.float64, np.complex128


def transform(vector: np.ndarray, length: int, allocator: DspAllocator = None) -> int:
    """
    DCT type II, unscaled, in place.

        y[k] = sum_{n=0}^{N-1} x[n] * cos(pi * k * (2n + 1) / (2N))

    The samples are reordered (even positions ascending, odd positions
    descending from the end) so that one real FFT of length N gives the
    spectrum V. Each coefficient is then Re(V[k] * exp(-j*pi*k / (2N))).
    Only V[0..N/2] is computed; V[k] for k > N/2 is conj(V[N-k]).

    Args:
        vector: 1D float array, overwritten in vector[:length]
        length: Number of samples to transform (N)
        allocator: Allocator for scratch buffers (None = private allocator)

    Returns:
        OK on success. OUT_OF_MEMORY if a buffer cannot be allocated,
        any other status reported by the real FFT, or a validation
        status. On failure the vector is left unchanged.
    """
    status = _check_vector(vector, length)
    if status != OK:
        return status
    if length == 0:
        return OK

    if allocator is None:
        allocator = DspAllocator()

    real_dtype, complex_dtype = _working_dtypes(vector)
    half_len = length // 2
    n_bins = half_len + 1

    with ExitStack() as scope:
        fft_data_out = allocator.calloc(n_bins, complex_dtype)
        if fft_data_out is None:
            return OUT_OF_MEMORY
        scope.callback(allocator.free, fft_data_out, fft_data_out.nbytes)

        fft_data_in = allocator.calloc(length, real_dtype)
        if fft_data_in is None:
            return OUT_OF_MEMORY
        scope.callback(allocator.free, fft_data_in, fft_data_in.nbytes)

        # Even samples to the front, odd samples mirrored from the back
        idx = np.arange(half_len)
        fft_data_in[idx] = vector[2 * idx]
        fft_data_in[length - 1 - idx] = vector[2 * idx + 1]
        if length % 2 == 1:
            fft_data_in[half_len] = vector[length - 1]

        r = rfft(fft_data_in, length, fft_data_out, n_bins, length, allocator)
        if r != OK:
            return r

        theta = np.arange(n_bins) * np.pi / (2 * length)
        vector[:n_bins] = (fft_data_out.real * np.cos(theta) +
                           fft_data_out.imag * np.sin(theta))

        # Upper half from the conjugate-symmetric bins
        k = np.arange(n_bins, length)
        theta = k * np.pi / (2 * length)
        mirror = fft_data_out[length - k]
        vector[n_bins:length] = mirror.real * np.cos(theta) - mirror.imag * np.sin(theta)

    return OK


def inverse_transform(vector: np.ndarray, length: int, allocator: DspAllocator = None) -> int:
    """
    DCT type III, unscaled, in place.

        x[n] = X[0] / 2 + sum_{k=1}^{N-1} X[k] * cos(pi * k * (2n + 1) / (2N))

    inverse_transform(transform(x)) == x * N / 2.

    Args:
        vector: 1D float array of coefficients, overwritten in vector[:length]
        length: Number of coefficients (N)
        allocator: Allocator for scratch buffers and the FFT plan

    Returns:
        OK on success, OUT_OF_MEMORY if a buffer or the FFT plan cannot
        be allocated, or a validation status. On failure the vector is
        left unchanged.
    """
    status = _check_vector(vector, length)
    if status != OK:
        return status
    if length == 0:
        return OK

    if allocator is None:
        allocator = DspAllocator()

    _, complex_dtype = _working_dtypes(vector)
    half_len = length // 2

    with ExitStack() as scope:
        fft_data_out = allocator.calloc(length, complex_dtype)
        if fft_data_out is None:
            return OUT_OF_MEMORY
        scope.callback(allocator.free, fft_data_out, fft_data_out.nbytes)

        fft_data_in = allocator.calloc(length, complex_dtype)
        if fft_data_in is None:
            return OUT_OF_MEMORY
        scope.callback(allocator.free, fft_data_in, fft_data_in.nbytes)

        cfg = fft_alloc(length, inverse_fft=False)
        if cfg is None or not allocator.register_alloc(cfg, cfg.mem_length):
            return OUT_OF_MEMORY
        scope.callback(allocator.free, cfg, cfg.mem_length)

        vector[0] /= 2

        theta = np.arange(length) * np.pi / (2 * length)
        fft_data_in.real = vector[:length] * np.cos(theta)
        fft_data_in.imag = -vector[:length] * np.sin(theta)

        fft_execute(cfg, fft_data_in, fft_data_out)

        # Undo the even/odd reordering of the forward transform
        idx = np.arange(half_len)
        vector[2 * idx] = fft_data_out.real[idx]
        vector[2 * idx + 1] = fft_data_out.real[length - 1 - idx]
        if length % 2 == 1:
            vector[length - 1] = fft_data_out.real[half_len]

    return OK
