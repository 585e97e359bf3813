#!/usr/bin/env python3
"""
Forward DCT CLI

Usage:
    python forward_dct.py --input <path> --output <path> [--norm ortho]

Example:
    python forward_dct.py --input data/frames.npy --output coeffs.npy --norm ortho
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
from sigdsp.transform import dct2


def main():
    parser = argparse.ArgumentParser(
        description='Forward DCT - DCT-II of a signal or of each frame of a signal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Transform a stack of frames (one frame per row)
  python forward_dct.py --input data/frames.npy --output coeffs.npy

  # Orthonormal DCT with verbose output
  python forward_dct.py --input data/signal.csv --output coeffs.npy --norm ortho --verbose

  # Raw float32 samples, with a scratch memory budget
  python forward_dct.py --input data/signal.raw --output coeffs.raw --memory-limit 65536
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input signal path (.npy, .raw, .csv or .txt)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output coefficient path (.npy, .raw or .csv)')

    # Optional arguments
    parser.add_argument('--norm', '-n', choices=['none', NORM_ORTHO], default='none',
                        help='Normalization (default: none)')
    parser.add_argument('--dtype', '-d', default='float32',
                        help='Sample type of raw files (default: float32)')
    parser.add_argument('--memory-limit', '-m', type=int,
                        help='Maximum scratch memory in bytes')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args()

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    norm = None if args.norm == 'none' else args.norm

    try:
        if args.verbose:
            print(f"Reading input: {args.input}")

        start_time = time.time()

        signal = read_signal(args.input, dtype=args.dtype)

        if args.verbose:
            print(f"  Shape: {signal.shape}")
            print(f"  Dtype: {signal.dtype}")
            print(f"  Range: [{signal.min()}, {signal.max()}]")

        if args.verbose:
            print(f"Transforming with norm={args.norm}...")

        allocator = DspAllocator(limit=args.memory_limit)
        coeffs = np.array(signal)
        status = dct2(coeffs, norm=norm, allocator=allocator)
        if status != OK:
            print(f"Error: DCT failed with status {status_name(status)}", file=sys.stderr)
            sys.exit(1)

        written = write_signal(coeffs, args.output)

        elapsed = time.time() - start_time

        if args.verbose:
            frame_len = coeffs.shape[-1]
            energy = np.sum(coeffs.astype(np.float64) ** 2)
            low_energy = np.sum(coeffs[..., :max(1, frame_len // 4)].astype(np.float64) ** 2)
            print(f"\nResults:")
            print(f"  Frames: {1 if coeffs.ndim == 1 else coeffs.shape[0]}")
            print(f"  Frame length: {frame_len}")
            if energy > 0:
                print(f"  Energy in lowest quarter: {low_energy / energy * 100:.1f}%")
            print(f"  Peak scratch memory: {allocator.peak_memory_in_use:,} bytes")
            print(f"  Transform time: {elapsed:.3f}s")
            print(f"\nOutput written to: {written}")
        else:
            print(f"Transformed: {args.input} -> {written} {coeffs.shape}")

    except ValueError as e:
        print(f"Error: Invalid input file - {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
