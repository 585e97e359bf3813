"""Explicit DCT-II matrix, used as an O(N^2) reference for the fast transforms."""

import numpy as np

from ..constants import NORM_MODES, NORM_ORTHO


def create_dct_matrix(N: int, norm: str = None) -> np.ndarray:
    """
    Generate the 1D DCT-II transform matrix of size N x N.

    The DCT matrix T has elements:
        T[i, j] = c[i] * cos((2j + 1) * i * pi / (2N))

    where, for norm=None (same convention as dct2):
        c[k] = 2

    and for norm='ortho':
        c[0] = 1/sqrt(N)
        c[k] = sqrt(2/N) for k > 0

    The 'ortho' matrix is orthogonal: T @ T.T = I

    Args:
        N: Size of the transform
        norm: None or 'ortho'

    Returns:
        N x N DCT transform matrix

    Raises:
        ValueError: If norm is not a supported mode
    """
    if norm not in NORM_MODES:
        raise ValueError(f"Unsupported normalization: {norm!r}")

    T = np.zeros((N, N))
    if norm == NORM_ORTHO:
        c0 = 1 / np.sqrt(N)
        ck = np.sqrt(2 / N)
    else:
        c0 = ck = 2.0

    for i in range(N):
        coeff = c0 if i == 0 else ck
        for j in range(N):
            T[i, j] = coeff * np.cos((2 * j + 1) * i * np.pi / (2 * N))

    return T
