"""Signal reader supporting NumPy, raw and CSV formats."""

import numpy as np
from pathlib import Path

from ..constants import DEFAULT_RAW_DTYPE


def read_signal(path: str, dtype: str = DEFAULT_RAW_DTYPE) -> np.ndarray:
    """
    Read a signal, or a stack of frames, from file.

    Args:
        path: Path to the signal file (.npy, .raw, .csv or .txt)
        dtype: Sample type of .raw files (default: float32)

    Returns:
        1D signal or 2D array of frames (one frame per row), floating point

    Raises:
        ValueError: If format is unsupported or the data is not 1D/2D
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == '.npy':
        data = np.load(str(path))
    elif suffix == '.raw':
        data = _read_raw(path, dtype)
    elif suffix in ('.csv', '.txt'):
        data = np.loadtxt(str(path), delimiter=',', ndmin=1)
    else:
        raise ValueError(f"Unsupported file format: {suffix}")

    if data.ndim not in (1, 2):
        raise ValueError(f"Expected 1D or 2D array, got {data.ndim}D")

    if not np.issubdtype(data.dtype, np.floating):
        data = data.astype(np.float64)
    return data


def _read_raw(path: Path, dtype: str) -> np.ndarray:
    """Read headerless little-endian samples."""
    dtype = np.dtype(dtype).newbyteorder('<')
    with open(path, 'rb') as f:
        raw = f.read()

    if len(raw) % dtype.itemsize != 0:
        raise ValueError(f"Data size mismatch. {len(raw)} bytes is not a multiple "
                         f"of the {dtype.itemsize}-byte sample size")

    # Copy to a native, writable array
    return np.frombuffer(raw, dtype=dtype).astype(dtype.newbyteorder('='))
