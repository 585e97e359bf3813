#!/usr/bin/env python3
"""
Inverse DCT CLI

Usage:
    python inverse_dct.py --input <path> --output <path> [--norm ortho]

Example:
    python inverse_dct.py --input coeffs.npy --output recovered.npy --reference data/frames.npy
"""

import argparse
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np
from sigdsp.constants import OK, NORM_ORTHO, status_name
from sigdsp.io import read_signal, write_signal
from sigdsp.memory import DspAllocator
from sigdsp.metrics import calculate_rmse, calculate_snr
from sigdsp.transform import idct2


def main():
    parser = argparse.ArgumentParser(
        description='Inverse DCT - recover a signal from DCT-II coefficients',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Invert coefficients written by forward_dct.py
  python inverse_dct.py --input coeffs.npy --output recovered.npy

  # Compare against the original signal
  python inverse_dct.py --input coeffs.npy --output recovered.npy \\
      --norm ortho --reference data/frames.npy --verbose
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input coefficient path (.npy, .raw, .csv or .txt)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output signal path (.npy, .raw or .csv)')

    # Optional arguments
    parser.add_argument('--norm', '-n', choices=['none', NORM_ORTHO], default='none',
                        help='Normalization used by the forward transform (default: none)')
    parser.add_argument('--dtype', '-d', default='float32',
                        help='Sample type of raw files (default: float32)')
    parser.add_argument('--reference', '-r',
                        help='Original signal to compare the reconstruction with')
    parser.add_argument('--memory-limit', '-m', type=int,
                        help='Maximum scratch memory in bytes')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args()

    # Check input files exist
    for path in (args.input, args.reference):
        if path is not None and not os.path.exists(path):
            print(f"Error: Input file not found: {path}", file=sys.stderr)
            sys.exit(1)

    norm = None if args.norm == 'none' else args.norm

    try:
        if args.verbose:
            print(f"Reading coefficients: {args.input}")

        start_time = time.time()

        coeffs = read_signal(args.input, dtype=args.dtype)

        if args.verbose:
            print(f"  Shape: {coeffs.shape}")
            print(f"  Dtype: {coeffs.dtype}")
            print("Inverse transforming...")

        allocator = DspAllocator(limit=args.memory_limit)
        signal = np.array(coeffs)
        status = idct2(signal, norm=norm, allocator=allocator)
        if status != OK:
            print(f"Error: Inverse DCT failed with status {status_name(status)}",
                  file=sys.stderr)
            sys.exit(1)

        elapsed = time.time() - start_time

        written = write_signal(signal, args.output)

        if args.verbose:
            print(f"\nReconstructed signal:")
            print(f"  Shape: {signal.shape}")
            print(f"  Range: [{signal.min()}, {signal.max()}]")
            print(f"  Peak scratch memory: {allocator.peak_memory_in_use:,} bytes")
            print(f"  Transform time: {elapsed:.3f}s")

        if args.reference is not None:
            reference = read_signal(args.reference, dtype=args.dtype)
            if reference.shape != signal.shape:
                print(f"Error: Reference shape {reference.shape} does not match "
                      f"{signal.shape}", file=sys.stderr)
                sys.exit(1)
            print(f"  RMSE vs reference: {calculate_rmse(reference, signal):.3e}")
            print(f"  SNR vs reference:  {calculate_snr(reference, signal):.2f} dB")

        if args.verbose:
            print(f"\nOutput written to: {written}")
        else:
            print(f"Recovered: {args.input} -> {written} {signal.shape}")

    except ValueError as e:
        print(f"Error: Invalid coefficient file - {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
