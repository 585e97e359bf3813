"""Signal writer supporting NumPy, raw and CSV formats."""

import numpy as np
from pathlib import Path


def write_signal(signal: np.ndarray, path: str, format: str = None) -> Path:
    """
    Write a signal, or a stack of frames, to file.

    Args:
        signal: 1D or 2D numpy array
        path: Output file path
        format: Output format ('npy', 'raw' or 'csv'). Auto-detected from extension if None.

    Returns:
        Path actually written (an unknown extension is replaced by .npy)

    Raises:
        ValueError: If format is unsupported or the data is not 1D/2D
    """
    path = Path(path)

    # Auto-detect format from extension
    if format is None:
        suffix = path.suffix.lower()
        if suffix in ('.npy', '.raw', '.csv'):
            format = suffix[1:]
        elif suffix == '.txt':
            format = 'csv'
        else:
            # Default to npy
            format = 'npy'
            path = path.with_suffix('.npy')

    if signal.ndim not in (1, 2):
        raise ValueError(f"Expected 1D or 2D array, got {signal.ndim}D")

    if format == 'npy':
        np.save(str(path), signal)
    elif format == 'raw':
        with open(path, 'wb') as f:
            f.write(signal.astype(signal.dtype.newbyteorder('<')).tobytes())
    elif format == 'csv':
        # One frame per line; a 1D signal is a single line
        np.savetxt(str(path), np.atleast_2d(signal), delimiter=',', fmt='%.17g')
    else:
        raise ValueError(f"Unsupported format: {format}")

    return path
