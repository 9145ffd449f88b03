#!/usr/bin/env python3
"""Quick perf benchmark for parsing and re-stringifying script files."""

from __future__ import annotations

import argparse
import cProfile
import io
import logging
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from shroudingers import parse, stringify


def _collect_script_files(root: Path) -> list[Path]:
    files = sorted(root.rglob("*.txt"))
    return [path for path in files if path.is_file()]


def _run_once(
    texts: list[str],
    *,
    label: str,
    show_progress: bool,
    roundtrip: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_properties = 0
    total_failures = 0
    iterator = (
        tqdm(texts, desc=label, unit="file")
        if show_progress
        else texts
    )
    for text in iterator:
        result = parse(text)
        if result.document is None:
            total_failures += 1
            continue
        total_properties += len(result.document.properties)
        if roundtrip:
            stringify(result.document)
    duration = time.perf_counter() - start
    return duration, total_properties, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark Clausewitz parsing throughput")
    parser.add_argument("root", type=Path, help="Directory scanned recursively for *.txt scripts")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--roundtrip",
        action="store_true",
        help="Also stringify every parsed document",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--limit-files",
        type=int,
        default=0,
        help="Optional file limit for quick profiling/smoke tests (0 = all files)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_script_files(root)
    if not files:
        raise SystemExit(f"No .txt files found under {root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    texts = [path.read_text(encoding="utf-8-sig", errors="replace") for path in files]
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        warmups = max(args.warmups, 0)
        for warmup_idx in range(warmups):
            _run_once(
                texts,
                label=f"warmup {warmup_idx + 1}/{warmups}",
                show_progress=show_progress,
                roundtrip=args.roundtrip,
            )

        timings: list[float] = []
        properties_count = 0
        failures_count = 0
        runs = max(args.runs, 1)
        for run_idx in range(runs):
            duration, properties_count, failures_count = _run_once(
                texts,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
                roundtrip=args.roundtrip,
            )
            timings.append(duration)
        return timings, properties_count, failures_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, properties_count, failures_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, properties_count, failures_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)} (failed: {failures_count})")
    print(f"Top-level properties: {properties_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
