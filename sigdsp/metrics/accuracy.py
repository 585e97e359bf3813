"""Accuracy metrics for transform round-trip evaluation."""

import numpy as np


def calculate_rmse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Root Mean Squared Error (RMSE).

    Args:
        original: Original signal
        reconstructed: Reconstructed signal

    Returns:
        RMSE value
    """
    diff = original.astype(np.float64) - reconstructed.astype(np.float64)
    if diff.size == 0:
        return 0.0
    mse = np.mean(diff ** 2)
    return float(np.sqrt(mse))


def calculate_max_abs_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Largest absolute sample difference."""
    diff = original.astype(np.float64) - reconstructed.astype(np.float64)
    if diff.size == 0:
        return 0.0
    return float(np.abs(diff).max())


def calculate_relative_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate the max-norm relative error.

        rel = max|original - reconstructed| / max|original|

    An all-zero original gives the absolute error instead.

    Args:
        original: Original signal
        reconstructed: Reconstructed signal

    Returns:
        Relative error
    """
    error = calculate_max_abs_error(original, reconstructed)
    if original.size == 0:
        return error

    scale = float(np.abs(original.astype(np.float64)).max())
    if scale == 0:
        return error
    return error / scale


def calculate_snr(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Signal-to-Noise Ratio (SNR).

    SNR = 10 * log10(sum(original^2) / sum((original - reconstructed)^2))

    Args:
        original: Original signal
        reconstructed: Reconstructed signal

    Returns:
        SNR in dB (inf for an exact reconstruction)
    """
    ref = original.astype(np.float64)
    noise = np.sum((ref - reconstructed.astype(np.float64)) ** 2)

    if noise == 0:
        return float('inf')

    return float(10 * np.log10(np.sum(ref ** 2) / noise))
