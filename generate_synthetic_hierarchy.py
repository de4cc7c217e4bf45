#!/usr/bin/env python3
"""
Synthetic dataset generator for hierarchy reader benchmarks.

Generates a large newline-delimited file of '<key> <json>' entries in random
key order, mixed with lines that exercise every skip path of the reader:
bad keys, bad JSON payloads, "count" placeholder entries and blank lines.
"""

import argparse
import json
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

KINDS = ["country", "region", "subregion", "locality", "suburb", "street", "building"]


def generate_line(index: int, rng: random.Random, rates: dict[str, float]) -> str:
    """
    Produce one input line.

    Args:
        index: Sequence number of the line (used in generated names).
        rng: Random number generator.
        rates: Probabilities for "blank", "bad_key", "bad_json" and "count" lines.

    Returns:
        The line without its trailing newline.
    """
    roll = rng.random()
    if roll < rates["blank"]:
        return ""
    roll -= rates["blank"]

    key = rng.randrange(-(2**63), 2**63)
    if roll < rates["bad_key"]:
        return f"id{index} " + json.dumps({"kind": "locality", "name": f"Bad{index}"})
    roll -= rates["bad_key"]

    if roll < rates["bad_json"]:
        return f'{key} {{"kind": "street", "name": "Broken{index}"'
    roll -= rates["bad_json"]

    if roll < rates["count"]:
        return f"{key} " + json.dumps({"kind": "count", "value": rng.randrange(1000)})

    kind = rng.choice(KINDS)
    return f"{key} " + json.dumps({"kind": kind, "name": f"{kind.title()} {index}"})


def generate_synthetic_dataset(
    output_path: str,
    num_entries: int,
    rates: dict[str, float],
    seed: int,
) -> int:
    """
    Generate a synthetic hierarchy file.

    Streams output line-by-line to avoid memory issues.

    Returns:
        Total number of lines written.
    """
    rng = random.Random(seed)

    with open(output_path, "w", encoding="utf-8", buffering=BUFFER_SIZE) as f:
        for i in range(num_entries):
            f.write(generate_line(i, rng, rates) + "\n")

            # Progress indicator every 1M lines
            if (i + 1) % 1_000_000 == 0:
                print(f"  Generated {i + 1}/{num_entries} lines...", file=sys.stderr)

    return num_entries


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate synthetic hierarchy dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5M lines with the default error mix
  python generate_synthetic_hierarchy.py --out data/hierarchy.txt --entries 5000000

  # Clean input, no skipped lines
  python generate_synthetic_hierarchy.py --out data/clean.txt --bad-key-rate 0 \\
      --bad-json-rate 0 --count-rate 0 --blank-rate 0
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--entries",
        type=int,
        default=1_000_000,
        help="Number of lines to write (default: 1000000)",
    )
    parser.add_argument(
        "--bad-key-rate",
        type=float,
        default=0.001,
        help="Fraction of lines with an unparsable key (default: 0.001)",
    )
    parser.add_argument(
        "--bad-json-rate",
        type=float,
        default=0.001,
        help="Fraction of lines with a broken JSON payload (default: 0.001)",
    )
    parser.add_argument(
        "--count-rate",
        type=float,
        default=0.01,
        help="Fraction of 'count' placeholder entries (default: 0.01)",
    )
    parser.add_argument(
        "--blank-rate",
        type=float,
        default=0.0,
        help="Fraction of blank lines (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    rates = {
        "blank": args.blank_rate,
        "bad_key": args.bad_key_rate,
        "bad_json": args.bad_json_rate,
        "count": args.count_rate,
    }

    # Validate
    if args.entries < 0:
        parser.error("--entries must be non-negative")
    if any(rate < 0 for rate in rates.values()) or sum(rates.values()) > 1:
        parser.error("rates must be non-negative and sum to at most 1")

    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Entries: {args.entries:,}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)
    print("Generating...", file=sys.stderr)

    total_lines = generate_synthetic_dataset(
        output_path=args.out,
        num_entries=args.entries,
        rates=rates,
        seed=args.seed,
    )

    print(f"Done! Wrote {total_lines:,} lines to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
