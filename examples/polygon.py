"""Measure a closed polygon: its perimeter and (shoelace) area"""
from __future__ import annotations

from math import dist
from typing import List, Tuple

from pairing import Wrapping, paired

Polygon = List[Tuple[float, float]]

HOUSE: Polygon = [(0, 0), (4, 0), (4, 3), (2, 5), (0, 3)]


def perimeter(points: Polygon) -> float:
    return sum(dist(a, b) for a, b in paired(points, Wrapping.FIRST_LAST))


def area(points: Polygon) -> float:
    return abs(
        sum(
            x1 * y2 - x2 * y1
            for (x1, y1), (x2, y2) in paired(points, Wrapping.FIRST_LAST)
        )
        / 2
    )


def main() -> None:
    print(f"perimeter: {perimeter(HOUSE):.3f}")
    print(f"area: {area(HOUSE):.3f}")


if __name__ == "__main__":
    main()
