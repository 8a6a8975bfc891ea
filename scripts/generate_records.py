#!/usr/bin/env python3
"""Generate a random traffic input stream for manual testing.

Usage
-----
::

    python scripts/generate_records.py --cars 20 --lines 500 > records.txt
    trafficlog records.txt

Options::

    --cars N          Number of distinct plates (default 10)
    --roads N         Number of distinct roads (default 5)
    --lines N         Number of lines to emit (default 100)
    --query-rate F    Fraction of lines that are queries (default 0.1)
    --noise-rate F    Fraction of lines that are malformed (default 0.0)
    --seed N          Random seed
"""

from __future__ import annotations

import argparse
import random
import string
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from trafficlog.config import TrafficConfig  # noqa: E402
from trafficlog.models.distance import format_distance  # noqa: E402


def _plate(rng: random.Random) -> str:
    alphabet = string.ascii_uppercase + string.digits
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(3, 11)))


def _point(rng: random.Random) -> str:
    return format_distance(rng.randint(0, 5_000))


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random trafficlog input.")
    parser.add_argument("--cars", type=int, default=10)
    parser.add_argument("--roads", type=int, default=5)
    parser.add_argument("--lines", type=int, default=100)
    parser.add_argument("--query-rate", type=float, default=0.1)
    parser.add_argument("--noise-rate", type=float, default=0.0)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    config = TrafficConfig.from_env()
    plates = [_plate(rng) for _ in range(args.cars)]
    roads = [f"{rng.choice(config.categories)}{rng.randint(1, 999)}" for _ in range(args.roads)]

    for _ in range(args.lines):
        roll = rng.random()
        if roll < args.noise_rate:
            print("garbage " + _plate(rng))
        elif roll < args.noise_rate + args.query_rate:
            target = rng.choice(["", rng.choice(plates), rng.choice(roads)])
            print(f"?{target}")
        else:
            print(f"{rng.choice(plates)} {rng.choice(roads)} {_point(rng)}")


if __name__ == "__main__":
    main()
