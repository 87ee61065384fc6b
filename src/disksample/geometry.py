"""
Geometry utilities for Poisson-disc sampling.

Contains:
- DiscGrid: uniform grid over the disc's bounding square for neighbour rejection
- Disc helpers: containment, brute-force validity, array conversion
"""

import math
import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence

from .config import GridKey, Point


@dataclass
class DiscGrid:
    """
    Uniform grid covering the square [-max_radius, max_radius]².

    Cells are at least `spread` wide, so any two points closer than `spread`
    sit in the same or adjacent cells and a 3x3 scan finds every conflict.
    """
    max_radius: float
    spread: float
    cells: Dict[GridKey, List[Point]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.extent = self.max_radius * 2
        cells = max(1, int(math.floor(self.extent / self.spread)))
        # floor() of a rounded quotient can overshoot by one
        while cells > 1 and self.extent / cells < self.spread:
            cells -= 1
        self.cells_per_axis = cells
        self.cell_width = self.extent / cells
        self._count = 0

    def cell_coordinate_of(self, point: Point) -> GridKey:
        """Convert a disc-local point to its (clamped) grid cell coordinates."""
        last = self.cells_per_axis - 1
        ix = int(math.floor((point[0] + self.max_radius) / self.cell_width))
        iy = int(math.floor((point[1] + self.max_radius) / self.cell_width))
        return (min(max(ix, 0), last), min(max(iy, 0), last))

    def neighbourhood(self, cell: GridKey) -> Iterator[GridKey]:
        """Yield the keys of the 3x3 block around a cell, clipped to the grid."""
        last = self.cells_per_axis - 1
        cx, cy = cell
        for gx in range(max(cx - 1, 0), min(cx + 1, last) + 1):
            for gy in range(max(cy - 1, 0), min(cy + 1, last) + 1):
                yield (gx, gy)

    def is_valid_candidate(self, cell: GridKey, point: Point, spread: float) -> bool:
        """True when no stored point in the neighbourhood is closer than spread."""
        spread_sq = spread * spread
        px, py = point
        for key in self.neighbourhood(cell):
            for qx, qy in self.cells.get(key, ()):
                dx = px - qx
                dy = py - qy
                if dx * dx + dy * dy < spread_sq:
                    return False
        return True

    def insert(self, cell: GridKey, point: Point) -> None:
        self.cells.setdefault(cell, []).append(point)
        self._count += 1

    def points(self) -> Iterator[Point]:
        for occupants in self.cells.values():
            yield from occupants

    @property
    def occupied_cells(self) -> int:
        return len(self.cells)

    def __len__(self) -> int:
        return self._count


def in_disc(point: Point, radius: float) -> bool:
    """Squared-distance containment test against a disc centred on the origin."""
    return point[0] * point[0] + point[1] * point[1] <= radius * radius


def is_valid_position(point: Point, spread: float, max_radius: float, points: Sequence[Point]) -> bool:
    """
    Brute-force validity check, assuming the disc centre is the origin.

    Rejects points off the disc, then compares against every existing point.
    Linear in len(points); the grid answers the same question in constant time.
    """
    if not in_disc(point, max_radius):
        return False

    spread_sq = spread * spread
    for other in points:
        dx = point[0] - other[0]
        dy = point[1] - other[1]
        if dx * dx + dy * dy < spread_sq:
            return False
    return True


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into an (n, 2) float array."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array(points, dtype=float)


def to_vector3(points: Sequence[Point], plane: str = "xy") -> np.ndarray:
    """
    Lift disc points to 3D.

    plane="xy" keeps (x, y, 0); plane="xz" lays the disc flat as (x, 0, y).
    """
    flat = points_to_array(points)
    lifted = np.zeros((len(flat), 3))
    if plane == "xy":
        lifted[:, :2] = flat
    elif plane == "xz":
        lifted[:, 0] = flat[:, 0]
        lifted[:, 2] = flat[:, 1]
    else:
        raise ValueError(f"plane must be 'xy' or 'xz', got {plane!r}")
    return lifted


def min_pairwise_distance(points: Sequence[Point]) -> float:
    """Smallest distance between any two points (inf for fewer than two)."""
    arr = points_to_array(points)
    if len(arr) < 2:
        return float('inf')

    dists = np.linalg.norm(arr[:, np.newaxis, :] - arr[np.newaxis, :, :], axis=2)
    np.fill_diagonal(dists, np.inf)
    return float(np.min(dists))
