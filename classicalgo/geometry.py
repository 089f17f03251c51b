"""Points in the plane."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass

__all__ = ["Point", "main"]


@dataclass
class Point:
    """A mutable point with ``x`` and ``y`` coordinates."""

    x: float
    y: float

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)


def main(argv: list[str] | None = None) -> int:
    """Print the distance between two points."""
    parser = argparse.ArgumentParser(description="Distance between two points.")
    parser.add_argument(
        "coords",
        nargs="*",
        type=float,
        metavar="N",
        help="x1 y1 x2 y2 (default: 10 21 7 25)",
    )
    args = parser.parse_args(argv)
    coords = args.coords or [10.0, 21.0, 7.0, 25.0]
    if len(coords) != 4:
        parser.error("expected exactly four coordinates: x1 y1 x2 y2")
    p = Point(coords[0], coords[1])
    q = Point(coords[2], coords[3])
    print(f"Distancia entre pontos: {p.distance(q):.1f}")
    return 0