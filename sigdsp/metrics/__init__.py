"""Accuracy metrics for the DSP transform library."""

from .accuracy import (
    calculate_rmse,
    calculate_max_abs_error,
    calculate_relative_error,
    calculate_snr,
)

__all__ = [
    'calculate_rmse',
    'calculate_max_abs_error',
    'calculate_relative_error',
    'calculate_snr',
]
