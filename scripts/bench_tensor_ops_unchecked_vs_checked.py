# scripts/bench_tensor_ops_unchecked_vs_checked.py
"""
Microbench: Tensor axis / reduction / arithmetic ops (unchecked vs checked).

What it measures
----------------
- Per-op latency for a selected set of ops on an unchecked tensor and on a
  checked tensor of the same shape.
- Uses warmup iterations (not recorded), then repeats with median/p95.
- Optionally compares each result against a plain NumPy reference.

Notes
-----
- Checked tensors validate every coordinate mapping, so ops that go through
  `location` / `index` per element (element access, printing) show the
  largest gap. The axis folds only touch the flat buffer and should be close.

Example
-------
python -O scripts/bench_tensor_ops_unchecked_vs_checked.py --ops add mul max_dim avg_dim \
    --shape 64 32 16 --axis 1 --warmup 20 --repeats 100 --check
"""

from __future__ import annotations

import argparse
import math
import operator
import statistics
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

import numpy as np

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from densetensor import AccessMode, Tensor  # noqa: E402


# ----------------------------
# Stats helpers
# ----------------------------
def _median(xs: Sequence[float]) -> float:
    return statistics.median(xs) if xs else float("nan")


def _p95(xs: Sequence[float]) -> float:
    if not xs:
        return float("nan")
    ys = sorted(xs)
    k = int(math.ceil(0.95 * len(ys))) - 1
    k = max(0, min(k, len(ys) - 1))
    return ys[k]


def _fmt_us(sec: float) -> str:
    return f"{sec * 1e6:10.1f} us"


@dataclass
class OpResult:
    name: str
    unchecked_med: float
    unchecked_p95: float
    checked_med: float
    checked_p95: float


# ----------------------------
# Bench core
# ----------------------------
def _time_op(fn: Callable[[], object], *, warmup: int, repeats: int) -> List[float]:
    for _ in range(warmup):
        fn()

    times: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def _build_ops(a: Tensor, b: Tensor, axis: int) -> Dict[str, Callable[[], object]]:
    last = tuple(d - 1 for d in a.dim)
    return {
        "add": lambda: a + b,
        "sub": lambda: a - b,
        "mul": lambda: a * b,
        "add_scalar": lambda: a + 0.5,
        "neg": lambda: -a,
        "location": lambda: a.location(last),
        "index": lambda: a.index(a.nelem - 1),
        "getitem": lambda: a[last],
        "plane": lambda: a.plane(axis),
        "accumulate": lambda: a.accumulate(0, axis, operator.add),
        "max_dim": lambda: a.max_dim(axis),
        "avg_dim": lambda: a.avg_dim(axis),
        "repeat_inner": lambda: a.repeat_inner(2),
        "clone": lambda: a.clone(),
    }


def _reference(name: str, arr: np.ndarray, other: np.ndarray, axis: int):
    ax = arr.ndim - 1 - axis
    refs = {
        "add": lambda: arr + other,
        "sub": lambda: arr - other,
        "mul": lambda: arr * other,
        "add_scalar": lambda: arr + 0.5,
        "neg": lambda: -arr,
        "accumulate": lambda: arr.sum(axis=ax),
        "avg_dim": lambda: arr.mean(axis=ax),
        "repeat_inner": lambda: np.repeat(arr[..., None], 2, axis=-1),
        "clone": lambda: arr.copy(),
    }
    fn = refs.get(name)
    return fn() if fn is not None else None


def _sanity_check(name: str, out: object, ref) -> None:
    if ref is None or not isinstance(out, Tensor):
        return
    got = out.to_numpy()
    if not np.allclose(got, ref, rtol=1e-10, atol=1e-12):
        max_abs = float(np.max(np.abs(got - ref)))
        raise AssertionError(f"[sanity] {name} mismatch: max_abs={max_abs}")


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--shape",
        nargs="+",
        type=int,
        default=[64, 32, 16],
        help="Tensor shape, e.g. --shape 64 32 16",
    )
    ap.add_argument("--axis", type=int, default=0, help="Axis counted from the right")
    ap.add_argument("--warmup", type=int, default=20)
    ap.add_argument("--repeats", type=int, default=100)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument(
        "--ops",
        nargs="+",
        default=None,
        help="Subset of ops to run (default: all)",
    )
    ap.add_argument(
        "--check",
        action="store_true",
        help="Compare results against NumPy before timing",
    )
    args = ap.parse_args()

    shape = tuple(args.shape)
    rng = np.random.default_rng(args.seed)
    arr_a = rng.standard_normal(shape)
    arr_b = rng.standard_normal(shape)

    print("=" * 88)
    print(
        f"densetensor bench | shape={shape} axis={args.axis} "
        f"warmup={args.warmup} repeats={args.repeats}"
    )
    print("=" * 88)

    tensors = {}
    for mode in (AccessMode.UNCHECKED, AccessMode.CHECKED):
        a = Tensor.from_numpy(arr_a, access_mode=mode)
        b = Tensor.from_numpy(arr_b, access_mode=mode)
        tensors[mode] = _build_ops(a, b, args.axis)

    names = args.ops or list(tensors[AccessMode.UNCHECKED].keys())
    unknown = [n for n in names if n not in tensors[AccessMode.UNCHECKED]]
    if unknown:
        raise SystemExit(f"Unknown ops: {unknown}")

    if args.check:
        for name in names:
            ref = _reference(name, arr_a, arr_b, args.axis)
            for mode in tensors:
                _sanity_check(name, tensors[mode][name](), ref)
        print("Sanity: PASS (all selected ops with a NumPy reference)")

    results: List[OpResult] = []
    for name in names:
        u = _time_op(
            tensors[AccessMode.UNCHECKED][name],
            warmup=args.warmup,
            repeats=args.repeats,
        )
        c = _time_op(
            tensors[AccessMode.CHECKED][name],
            warmup=args.warmup,
            repeats=args.repeats,
        )
        results.append(OpResult(name, _median(u), _p95(u), _median(c), _p95(c)))

    print("\nResults (median / p95):")
    print("-" * 88)
    hdr = f"{'op':<14} {'unchecked med':>14} {'unchecked p95':>14} {'checked med':>14} {'checked p95':>14} {'ratio':>8}"
    print(hdr)
    print("-" * 88)
    for r in results:
        ratio = r.checked_med / r.unchecked_med if r.unchecked_med > 0 else float("nan")
        print(
            f"{r.name:<14} {_fmt_us(r.unchecked_med)} {_fmt_us(r.unchecked_p95)} "
            f"{_fmt_us(r.checked_med)} {_fmt_us(r.checked_p95)} {ratio:8.2f}"
        )
    print("-" * 88)


if __name__ == "__main__":
    main()
