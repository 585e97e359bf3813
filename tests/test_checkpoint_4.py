"""Checkpoint 4: Matrix DCT, Normalization, I/O and CLI Verification."""

import sys
import os
import subprocess
import tempfile

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from sigdsp.constants import OK, INPUT_MATRIX_EMPTY, PARAMETER_INVALID, NORM_ORTHO
from sigdsp.errors import DspError
from sigdsp.memory import DspAllocator
from sigdsp.transform import dct2, idct2, dct, idct, create_dct_matrix
from sigdsp.io import read_signal, write_signal
from sigdsp.metrics import (
    calculate_rmse, calculate_max_abs_error, calculate_relative_error, calculate_snr,
)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_dct_matrix_orthogonality():
    """Test that the ortho DCT matrix is orthogonal: T @ T' = I."""
    print("=" * 60)
    print("Test 1: DCT Matrix Orthogonality")
    print("=" * 60)

    for n in [1, 4, 8, 13]:
        T = create_dct_matrix(n, norm=NORM_ORTHO)
        max_error = np.abs(T @ T.T - np.eye(n)).max()
        assert np.allclose(T @ T.T, np.eye(n), atol=1e-10), f"N={n}: {max_error}"
        print(f"   ✓ N={n:2d}: max error from identity = {max_error:.2e}")

    try:
        create_dct_matrix(4, norm='backward')
    except ValueError:
        print("   ✓ Unknown normalization rejected")
    else:
        raise AssertionError("Unknown normalization accepted")

    print("✅ DCT matrix orthogonality test passed")


def test_dct2_frames():
    """Test row-wise dct2 against the matrix DCT, both normalizations."""
    print("\n" + "=" * 60)
    print("Test 2: Row-wise dct2 / idct2")
    print("=" * 60)

    rng = np.random.default_rng(21)
    frames = rng.standard_normal((6, 13))

    for norm in [None, NORM_ORTHO]:
        T = create_dct_matrix(13, norm=norm)
        allocator = DspAllocator()

        coeffs = frames.copy()
        assert dct2(coeffs, norm=norm, allocator=allocator) == OK
        assert np.allclose(coeffs, frames @ T.T, atol=1e-10)

        recovered = coeffs.copy()
        assert idct2(recovered, norm=norm, allocator=allocator) == OK
        assert np.allclose(recovered, frames, atol=1e-10)

        assert allocator.memory_in_use == 0
        print(f"   ✓ norm={norm}: matches matrix DCT, idct2 inverts it")

    # Orthonormal transform preserves energy (Parseval)
    coeffs = frames.copy()
    dct2(coeffs, norm=NORM_ORTHO)
    assert np.allclose(np.sum(coeffs ** 2, axis=1), np.sum(frames ** 2, axis=1))
    print("   ✓ norm='ortho' preserves per-frame energy")

    # A 1D array is a single frame, transformed in place
    signal = rng.standard_normal(10)
    vector = signal.copy()
    assert dct2(vector) == OK
    assert np.allclose(vector, create_dct_matrix(10) @ signal)
    print("   ✓ 1D input handled as one frame")

    print("✅ Row-wise dct2 test passed")


def test_dct2_statuses():
    """Test dct2 / idct2 validation statuses."""
    print("\n" + "=" * 60)
    print("Test 3: dct2 Statuses")
    print("=" * 60)

    assert dct2(np.zeros((0, 4))) == INPUT_MATRIX_EMPTY
    assert idct2(np.zeros((3, 0))) == INPUT_MATRIX_EMPTY
    assert dct2(np.zeros((2, 4)), norm='backward') == PARAMETER_INVALID
    assert dct2(np.zeros((2, 2, 2))) == PARAMETER_INVALID
    assert dct2(np.zeros((2, 4), dtype=np.int32)) == PARAMETER_INVALID
    print("   ✓ Empty, bad norm, 3D and integer input rejected")

    # Memory budget applies to every row
    allocator = DspAllocator(limit=16)
    assert dct2(np.ones((2, 8)), allocator=allocator) != OK
    assert allocator.memory_in_use == 0
    print("   ✓ Allocation failure reported without leaks")

    print("✅ dct2 status test passed")


def test_dct_helpers():
    """Test array-returning dct / idct."""
    print("\n" + "=" * 60)
    print("Test 4: dct / idct Helpers")
    print("=" * 60)

    x = np.array([1, 2, 3, 4])
    y = dct(x)

    assert y.dtype == np.float64, "Integer input is promoted to float64"
    assert np.array_equal(x, [1, 2, 3, 4]), "Input must not be modified"
    assert np.allclose(y, [20.0, -6.3086440598, 0.0, -0.4483415294], atol=1e-8)
    print(f"   dct([1, 2, 3, 4]) = {np.round(y, 6)}")

    assert np.allclose(idct(y), x)
    assert np.allclose(idct(dct(x, norm=NORM_ORTHO), norm=NORM_ORTHO), x)
    print("   ✓ idct inverts dct for both normalizations")

    f32 = np.linspace(-1, 1, 16, dtype=np.float32)
    assert dct(f32).dtype == np.float32
    assert dct([]).size == 0

    try:
        dct(x, norm='backward')
    except DspError as e:
        assert e.status == PARAMETER_INVALID
        print(f"   ✓ Failure raised as DspError: {e}")
    else:
        raise AssertionError("Bad norm did not raise")

    print("✅ dct / idct helper test passed")


def test_signal_io_roundtrip():
    """Test signal read/write for npy, raw and csv."""
    print("\n" + "=" * 60)
    print("Test 5: Signal I/O Roundtrip")
    print("=" * 60)

    rng = np.random.default_rng(4)
    frames = rng.standard_normal((3, 8))
    signal = rng.standard_normal(20).astype(np.float32)

    with tempfile.TemporaryDirectory() as tmp:
        path = write_signal(frames, os.path.join(tmp, 'frames.npy'))
        assert np.array_equal(read_signal(path), frames)
        print("   ✓ .npy (2D)")

        path = write_signal(signal, os.path.join(tmp, 'signal.raw'))
        assert np.array_equal(read_signal(path), signal)
        print("   ✓ .raw (float32)")

        path = write_signal(frames, os.path.join(tmp, 'frames.csv'))
        assert np.allclose(read_signal(path), frames, rtol=0, atol=1e-15)
        print("   ✓ .csv (2D)")

        path = write_signal(signal, os.path.join(tmp, 'signal.dat'))
        assert path.suffix == '.npy', "Unknown extension falls back to .npy"
        print("   ✓ Unknown extension written as .npy")

        with open(os.path.join(tmp, 'odd.raw'), 'wb') as f:
            f.write(b'\x00' * 6)
        for bad in ['odd.raw', 'signal.wav']:
            try:
                read_signal(os.path.join(tmp, bad))
            except ValueError as e:
                print(f"   ✓ Rejected {bad}: {e}")
            else:
                raise AssertionError(f"{bad} should be rejected")

    print("✅ Signal I/O roundtrip test passed")


def test_metrics():
    """Test accuracy metrics."""
    print("\n" + "=" * 60)
    print("Test 6: Accuracy Metrics")
    print("=" * 60)

    a = np.array([1.0, -2.0, 4.0])
    b = np.array([1.0, -2.0, 3.0])

    assert np.isclose(calculate_rmse(a, b), np.sqrt(1 / 3))
    assert calculate_max_abs_error(a, b) == 1.0
    assert calculate_relative_error(a, b) == 0.25
    assert np.isclose(calculate_snr(a, b), 10 * np.log10(21.0))
    assert calculate_snr(a, a) == float('inf')
    assert calculate_relative_error(np.zeros(3), np.full(3, 0.5)) == 0.5
    print("   ✓ RMSE, max error, relative error, SNR")

    print("✅ Metrics test passed")


def test_cli_roundtrip():
    """Test forward_dct.py followed by inverse_dct.py."""
    print("\n" + "=" * 60)
    print("Test 7: CLI Roundtrip")
    print("=" * 60)

    frames = np.random.default_rng(9).standard_normal((4, 32))

    with tempfile.TemporaryDirectory() as tmp:
        src = os.path.join(tmp, 'frames.npy')
        coeffs = os.path.join(tmp, 'coeffs.npy')
        out = os.path.join(tmp, 'recovered.npy')
        np.save(src, frames)

        forward = subprocess.run(
            [sys.executable, os.path.join(PROJECT_ROOT, 'forward_dct.py'),
             '-i', src, '-o', coeffs, '--norm', 'ortho'],
            capture_output=True, text=True)
        assert forward.returncode == 0, forward.stderr
        print(f"   {forward.stdout.strip()}")

        inverse = subprocess.run(
            [sys.executable, os.path.join(PROJECT_ROOT, 'inverse_dct.py'),
             '-i', coeffs, '-o', out, '--norm', 'ortho', '--reference', src],
            capture_output=True, text=True)
        assert inverse.returncode == 0, inverse.stderr
        print(f"   {inverse.stdout.strip()}")

        assert np.allclose(np.load(out), frames, atol=1e-10)
        assert np.allclose(np.load(coeffs), frames @ create_dct_matrix(32, NORM_ORTHO).T)

        # A budget too small for any scratch buffer fails cleanly
        starved = subprocess.run(
            [sys.executable, os.path.join(PROJECT_ROOT, 'forward_dct.py'),
             '-i', src, '-o', coeffs, '--memory-limit', '8'],
            capture_output=True, text=True)
        assert starved.returncode == 1
        assert 'OUT_OF_MEMORY' in starved.stderr
        print(f"   ✓ {starved.stderr.strip()}")

    print("✅ CLI roundtrip test passed")


def main():
    """Run all Checkpoint 4 tests."""
    print("\n" + "=" * 60)
    print("CHECKPOINT 4: MATRIX DCT, I/O AND CLI VERIFICATION")
    print("=" * 60 + "\n")

    tests = [
        ("DCT Matrix Orthogonality", test_dct_matrix_orthogonality),
        ("Row-wise dct2", test_dct2_frames),
        ("dct2 Statuses", test_dct2_statuses),
        ("dct / idct Helpers", test_dct_helpers),
        ("Signal I/O", test_signal_io_roundtrip),
        ("Metrics", test_metrics),
        ("CLI Roundtrip", test_cli_roundtrip),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except Exception as e:
            print(f"❌ {name} failed: {e}")
            results.append((name, False))

    # Summary
    print("\n" + "=" * 60)
    print("CHECKPOINT 4 SUMMARY")
    print("=" * 60)

    all_passed = True
    for name, passed in results:
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"   {name}: {status}")
        if not passed:
            all_passed = False

    print("\n" + "=" * 60)
    if all_passed:
        print("🎉 CHECKPOINT 4 PASSED - All tests successful!")
    else:
        print("⚠️  CHECKPOINT 4 FAILED - Some tests did not pass")
    print("=" * 60 + "\n")

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
