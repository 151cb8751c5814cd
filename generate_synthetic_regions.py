#!/usr/bin/env python3
"""
Synthetic dataset generator for age census benchmarks.

Writes one file per region into an output directory, one age per line, in
the layout the `age-census` CLI reads. A configurable fraction of lines are
negative sentinels, which the census discards.
"""

import argparse
import random
import sys
from pathlib import Path

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

# Sentinel written for "unknown age" lines
INVALID_AGE = -1


def generate_region_ages(
    count: int,
    max_age: int,
    invalid_ratio: float,
    rng: random.Random,
) -> list[int]:
    """
    Generate ages for a single region.

    Ages are drawn from a triangular distribution peaking at a random mode,
    so every region has a handful of clearly dominant values.

    Args:
        count: Number of lines to generate.
        max_age: Largest age to emit.
        invalid_ratio: Fraction of lines replaced by INVALID_AGE.
        rng: Random number generator.

    Returns:
        List of ages, possibly containing INVALID_AGE.
    """
    mode = rng.randint(0, max_age)
    ages = []
    for _ in range(count):
        if rng.random() < invalid_ratio:
            ages.append(INVALID_AGE)
        else:
            ages.append(int(rng.triangular(0, max_age, mode)))
    return ages


def generate_synthetic_regions(
    output_dir: str,
    num_regions: int,
    ages_per_region: int,
    max_age: int,
    invalid_ratio: float,
    seed: int,
) -> int:
    """
    Generate region files named region_000000.txt, region_000001.txt, ...

    Returns:
        Total number of lines written.
    """
    out_path = Path(output_dir)
    out_path.mkdir(parents=True, exist_ok=True)

    total_lines = 0
    for r in range(num_regions):
        # Seed RNG per region (deterministic per-region data)
        rng = random.Random(f"{seed}:{r}")
        ages = generate_region_ages(ages_per_region, max_age, invalid_ratio, rng)

        region_file = out_path / f"region_{r:06d}.txt"
        with open(region_file, "w", encoding="utf-8", buffering=BUFFER_SIZE) as f:
            for age in ages:
                f.write(f"{age}\n")
        total_lines += len(ages)

        # Progress indicator every 100 regions
        if (r + 1) % 100 == 0:
            print(f"  Generated {r + 1}/{num_regions} regions...", file=sys.stderr)

    return total_lines


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate synthetic per-region age files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 64 regions of 1M ages each
  python generate_synthetic_regions.py --out data/regions --regions 64 --ages 1000000

  # Then aggregate a few of them
  age-census data/regions region_000000 region_000001 region_000002
""",
    )

    parser.add_argument(
        "--out",
        required=True,
        help="Output directory",
    )
    parser.add_argument(
        "--regions",
        type=int,
        default=64,
        help="Number of region files (default: 64)",
    )
    parser.add_argument(
        "--ages",
        type=int,
        default=100000,
        help="Ages per region (default: 100000)",
    )
    parser.add_argument(
        "--max-age",
        type=int,
        default=110,
        help="Largest age to generate (default: 110)",
    )
    parser.add_argument(
        "--invalid-ratio",
        type=float,
        default=0.01,
        help="Fraction of lines written as -1 (default: 0.01)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    # Validate
    if args.regions < 1:
        parser.error("--regions must be at least 1")
    if args.ages < 0:
        parser.error("--ages must not be negative")
    if args.max_age < 0:
        parser.error("--max-age must not be negative")
    if not 0.0 <= args.invalid_ratio <= 1.0:
        parser.error("--invalid-ratio must be between 0 and 1")

    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Regions: {args.regions:,}", file=sys.stderr)
    print(f"Ages per region: {args.ages:,}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)

    print("Generating...", file=sys.stderr)
    total_lines = generate_synthetic_regions(
        output_dir=args.out,
        num_regions=args.regions,
        ages_per_region=args.ages,
        max_age=args.max_age,
        invalid_ratio=args.invalid_ratio,
        seed=args.seed,
    )

    print(f"Done! Wrote {total_lines:,} lines to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
