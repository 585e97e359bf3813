"""Row-wise DCT over matrices, with optional orthonormal scaling."""

import numpy as np

from ..constants import OK, INPUT_MATRIX_EMPTY, PARAMETER_INVALID, NORM_MODES, NORM_ORTHO
from ..errors import DspError
from ..memory import DspAllocator
from .fast_dct import transform, inverse_transform


def _as_rows(matrix):
    """2D view of matrix (a 1D array is a single row), or None if unsupported."""
    if not isinstance(matrix, np.ndarray) or matrix.ndim not in (1, 2):
        return None
    return matrix if matrix.ndim == 2 else matrix[np.newaxis, :]


def dct2(matrix: np.ndarray, norm: str = None, allocator: DspAllocator = None) -> int:
    """
    Forward DCT-II of every row, in place.

    Output convention: y[k] = 2 * sum_n x[n] * cos(pi * k * (2n + 1) / (2N)).
    With norm='ortho' y[0] is scaled by sqrt(1/(4N)) and y[k>0] by
    sqrt(1/(2N)), making the transform orthonormal.

    Args:
        matrix: 2D float array (rows x N), or 1D for a single row
        norm: None or 'ortho'
        allocator: Allocator shared by all row transforms

    Returns:
        OK, INPUT_MATRIX_EMPTY, PARAMETER_INVALID, or the first failing
        row's status. On failure the matrix contents are undefined.
    """
    if norm not in NORM_MODES:
        return PARAMETER_INVALID
    rows = _as_rows(matrix)
    if rows is None:
        return PARAMETER_INVALID
    if rows.size == 0:
        return INPUT_MATRIX_EMPTY

    n = rows.shape[1]
    for row in rows:
        r = transform(row, n, allocator)
        if r != OK:
            return r

    rows *= 2
    if norm == NORM_ORTHO:
        rows[:, 0] *= np.sqrt(1 / (4 * n))
        rows[:, 1:] *= np.sqrt(1 / (2 * n))

    return OK


def idct2(matrix: np.ndarray, norm: str = None, allocator: DspAllocator = None) -> int:
    """
    Inverse of dct2 for every row, in place.

    Args:
        matrix: 2D float array of coefficients, or 1D for a single row
        norm: Normalization used by the forward dct2 (None or 'ortho')
        allocator: Allocator shared by all row transforms

    Returns:
        Same statuses as dct2
    """
    if norm not in NORM_MODES:
        return PARAMETER_INVALID
    rows = _as_rows(matrix)
    if rows is None:
        return PARAMETER_INVALID
    if rows.size == 0:
        return INPUT_MATRIX_EMPTY

    n = rows.shape[1]

    # Back to the unscaled DCT-II coefficients of transform()
    scale = np.full(n, 0.5)
    if norm == NORM_ORTHO:
        scale[0] = np.sqrt(n)
        scale[1:] = np.sqrt(n / 2)

    for row in rows:
        row *= scale
        r = inverse_transform(row, n, allocator)
        if r != OK:
            return r
        row *= 2 / n

    return OK


def _float_copy(x) -> np.ndarray:
    x = np.asarray(x)
    return np.array(x, dtype=np.result_type(x.dtype, np.float32))


def dct(x, norm: str = None) -> np.ndarray:
    """
    DCT-II along the last axis, returning a new array.

    Args:
        x: 1D or 2D array-like
        norm: None or 'ortho'

    Returns:
        DCT coefficients (float32 for float32 input, float64 otherwise)

    Raises:
        DspError: If the transform reports failure
    """
    out = _float_copy(x)
    if out.size == 0:
        return out

    status = dct2(out, norm)
    if status != OK:
        raise DspError(status)
    return out


def idct(x, norm: str = None) -> np.ndarray:
    """
    Inverse of dct() along the last axis, returning a new array.

    Raises:
        DspError: If the transform reports failure
    """
    out = _float_copy(x)
    if out.size == 0:
        return out

    status = idct2(out, norm)
    if status != OK:
        raise DspError(status)
    return out
