"""Transform modules for the DSP transform library."""

from .fast_dct import transform, inverse_transform
from .dct2 import dct2, idct2, dct, idct
from .dct_matrix import create_dct_matrix

__all__ = [
    'transform',
    'inverse_transform',
    'dct2',
    'idct2',
    'dct',
    'idct',
    'create_dct_matrix',
]
