import math
import numpy as np
from typing import Iterator, List, Optional

from .config import (
    InitialPoint,
    Point,
    SamplerConfig,
    SamplingProgress,
    validate_arguments,
)
from .geometry import DiscGrid, in_disc


class PoissonDiscSampler:
    """Grows a Poisson-disc point set inside a disc from a list of active points."""

    def __init__(
        self,
        spread: float,
        max_radius: float,
        seed: int,
        config: Optional[SamplerConfig] = None,
    ):
        validate_arguments(spread, max_radius, seed)
        self.config = config or SamplerConfig()
        self.config.validate()

        self.spread = float(spread)
        self.max_radius = float(max_radius)
        self.seed = int(seed)
        self.effective_radius = self.max_radius * self.config.radius_fraction

        self.points: List[Point] = []
        self.progress = SamplingProgress()

    def _random_point_in_disc(self, rng: np.random.Generator) -> Point:
        """Uniform draw inside the effective disc."""
        angle = rng.uniform(0.0, 2.0 * math.pi)
        radius = self.effective_radius * math.sqrt(rng.uniform(0.0, 1.0))
        return (radius * math.cos(angle), radius * math.sin(angle))

    def _random_candidate(self, rng: np.random.Generator, centre: Point) -> Point:
        """Uniform angle, distance in [spread, 2 * spread) from the centre."""
        angle = rng.uniform(0.0, 2.0 * math.pi)
        distance = rng.uniform(self.spread, 2.0 * self.spread)
        return (centre[0] + math.cos(angle) * distance, centre[1] + math.sin(angle) * distance)

    def _accept(self, grid: DiscGrid, active: List[Point], point: Point) -> None:
        grid.insert(grid.cell_coordinate_of(point), point)
        active.append(point)
        self.points.append(point)
        self.progress.points_placed += 1
        self.progress.active_points = len(active)

        if self.config.verbose and self.progress.points_placed % self.config.progress_interval == 0:
            print(self.progress)

    @staticmethod
    def _evict(active: List[Point], index: int) -> None:
        """Remove by position: move the last entry into the hole."""
        last = active.pop()
        if index < len(active):
            active[index] = last

    def generate(self) -> Iterator[Point]:
        """
        Generate points until every active point is starved.

        Yields:
            Tuples of (x, y) for each accepted point, in acceptance order.
        """
        rng = np.random.default_rng(self.seed)
        grid = DiscGrid(self.max_radius, self.spread)
        active: List[Point] = []
        self.points = []
        self.progress = SamplingProgress()

        initial = self._random_point_in_disc(rng)
        if self.config.initial_point is InitialPoint.INCLUDE:
            self._accept(grid, active, initial)
            yield initial
        else:
            active.append(initial)
            self.progress.active_points = 1

        while active:
            index = int(rng.integers(len(active)))
            centre = active[index]
            success = False

            for _ in range(self.config.max_attempts):
                candidate = self._random_candidate(rng, centre)
                if not in_disc(candidate, self.effective_radius):
                    continue

                cell = grid.cell_coordinate_of(candidate)
                if grid.is_valid_candidate(cell, candidate, self.spread):
                    self._accept(grid, active, candidate)
                    success = True
                    yield candidate

            self.progress.rounds += 1
            if not success:
                self._evict(active, index)
                self.progress.starved_points += 1
                self.progress.active_points = len(active)

        if self.config.verbose:
            print(f"Done! {self.progress}")

    def sample(self) -> List[Point]:
        """Sample the disc and return the accepted points as a list."""
        return list(self.generate())


def generate_points(
    spread: float,
    max_radius: float,
    seed: int,
    config: Optional[SamplerConfig] = None,
) -> List[Point]:
    """
    Generate a Poisson-disc distribution of points on a disc.

    Args:
        spread: Minimum distance between any two points (> 0).
        max_radius: Radius of the disc, centred on the origin (> 0).
        seed: Seed of the random stream; equal inputs give equal output.
        config: Optional sampler configuration.

    Returns:
        List of (x, y) tuples, in the order they were accepted.

    Raises:
        InvalidArgumentError: On non-positive spread/max_radius, a non-integer
            seed, or an invalid config.
    """
    return PoissonDiscSampler(spread, max_radius, seed, config).sample()
