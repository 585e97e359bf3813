"""Constants for the DSP transform library."""

import numpy as np

# Status codes returned by the in-place transforms
OK = 0
OUT_OF_MEMORY = -1002
SIGNAL_SIZE_MISMATCH = -1003
INPUT_MATRIX_EMPTY = -1006
BUFFER_SIZE_MISMATCH = -1007
PARAMETER_INVALID = -1008

STATUS_NAMES = {
    OK: 'OK',
    OUT_OF_MEMORY: 'OUT_OF_MEMORY',
    SIGNAL_SIZE_MISMATCH: 'SIGNAL_SIZE_MISMATCH',
    INPUT_MATRIX_EMPTY: 'INPUT_MATRIX_EMPTY',
    BUFFER_SIZE_MISMATCH: 'BUFFER_SIZE_MISMATCH',
    PARAMETER_INVALID: 'PARAMETER_INVALID',
}

# DCT normalization modes (None = unnormalized)
NORM_ORTHO = 'ortho'
NORM_MODES = (None, NORM_ORTHO)

# FFT plan footprint used for allocation accounting:
# fixed state (nfft, direction, factor table) + one complex twiddle per bin
FFT_STATE_HEADER_BYTES = 264
COMPLEX_SLOT_BYTES = np.dtype(np.complex64).itemsize  # 8 bytes

# Sample format for headerless .raw signal files
DEFAULT_RAW_DTYPE = 'float32'


def status_name(status: int) -> str:
    """Return the symbolic name of a status code."""
    return STATUS_NAMES.get(status, f'UNKNOWN({status})')
