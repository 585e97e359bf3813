#!/usr/bin/env python3
"""
Run accuracy and timing experiments for the fast DCT.

Generates results/metrics.json with round-trip error, agreement with the
matrix DCT, timing and scratch memory per transform length.
"""

import sys
import os
import json
import time
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from sigdsp.constants import OK, status_name
from sigdsp.memory import DspAllocator
from sigdsp.transform import transform, inverse_transform, create_dct_matrix
from sigdsp.metrics import calculate_relative_error, calculate_snr


def time_call(fn, signal: np.ndarray, repeats: int) -> float:
    """Best-of-N wall time of fn on a fresh copy of signal, in microseconds."""
    best = float('inf')
    for _ in range(repeats):
        work = signal.copy()
        start = time.perf_counter()
        status = fn(work, len(work))
        best = min(best, time.perf_counter() - start)
        if status != OK:
            raise RuntimeError(f"{fn.__name__} failed: {status_name(status)}")
    return best * 1e6


def run_experiment(length: int, dtype, rng, repeats: int = 5):
    """Measure one transform length at one precision."""
    signal = rng.standard_normal(length).astype(dtype)

    # Forward vs matrix reference (dct2 convention is twice the unscaled DCT)
    allocator = DspAllocator()
    coeffs = signal.copy()
    status = transform(coeffs, length, allocator)
    if status != OK:
        raise RuntimeError(f"transform failed: {status_name(status)}")
    forward_peak = allocator.peak_memory_in_use
    reference = create_dct_matrix(length) @ signal.astype(np.float64) / 2

    # Round trip
    allocator = DspAllocator()
    recovered = coeffs.copy()
    status = inverse_transform(recovered, length, allocator)
    if status != OK:
        raise RuntimeError(f"inverse_transform failed: {status_name(status)}")
    inverse_peak = allocator.peak_memory_in_use
    recovered = recovered.astype(np.float64) * 2 / length

    return {
        'length': length,
        'dtype': np.dtype(dtype).name,
        'forward_rel_error': float(calculate_relative_error(reference, coeffs)),
        'roundtrip_rel_error': float(calculate_relative_error(signal, recovered)),
        'roundtrip_snr_db': round(calculate_snr(signal, recovered), 2),
        'forward_us': round(time_call(transform, signal, repeats), 1),
        'inverse_us': round(time_call(inverse_transform, coeffs, repeats), 1),
        'forward_peak_bytes': forward_peak,
        'inverse_peak_bytes': inverse_peak,
    }


def main():
    """Run all experiments."""
    print("=" * 60)
    print("FAST DCT - EXPERIMENT RUNNER")
    print("=" * 60)

    # Configuration
    lengths = [1, 2, 3, 8, 13, 15, 16, 17, 64, 100, 256, 1000, 1024]
    dtypes = [np.float32, np.float64]
    results_dir = "results"
    os.makedirs(results_dir, exist_ok=True)

    rng = np.random.default_rng(42)
    all_results = []

    for dtype in dtypes:
        print(f"\n--- {np.dtype(dtype).name} ---")
        for length in lengths:
            result = run_experiment(length, dtype, rng)
            all_results.append(result)
            print(f"  N={length:5d}: fwd err={result['forward_rel_error']:.2e}  "
                  f"roundtrip err={result['roundtrip_rel_error']:.2e}  "
                  f"fwd={result['forward_us']:.1f}us  inv={result['inverse_us']:.1f}us")

    output = {
        "experiment_date": datetime.now().isoformat(),
        "transform_info": {
            "forward": "DCT-II, unscaled, via real FFT of reordered input",
            "inverse": "DCT-III, unscaled, via complex FFT",
            "fft_backend": f"numpy {np.__version__}",
        },
        "results": all_results,
    }

    output_path = os.path.join(results_dir, "metrics.json")
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)

    print("\n" + "=" * 60)
    print("EXPERIMENT COMPLETE")
    print("=" * 60)
    print(f"\nResults saved to: {output_path}")

    # Summary table
    print("\n" + "-" * 60)
    print("SUMMARY TABLE")
    print("-" * 60)
    print(f"{'N':>6} {'dtype':>8} {'Fwd err':>10} {'RT err':>10} {'Peak B':>10}")
    print("-" * 60)
    for r in all_results:
        print(f"{r['length']:>6} {r['dtype']:>8} {r['forward_rel_error']:>10.2e} "
              f"{r['roundtrip_rel_error']:>10.2e} {r['inverse_peak_bytes']:>10,}")
    print("-" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
