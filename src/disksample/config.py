"""
Configuration and type definitions for Poisson-disc sampling.
"""

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Type aliases
Point = Tuple[float, float]  # (x, y), origin at the disc centre
GridKey = Tuple[int, int]


class InvalidArgumentError(ValueError):
    """Raised when sampling parameters cannot describe a valid disc."""


class InitialPoint(Enum):
    """What happens to the point that seeds the active list."""
    INCLUDE = "include"   # emitted and stored in the grid
    EXCLUDE = "exclude"   # only spawns candidates


@dataclass
class SamplerConfig:
    """
    Configuration parameters for the Poisson-disc sampler.

    Sampling:
        max_attempts: Candidates tried around an active point per round
        radius_fraction: Fraction of max_radius that bounds accepted points
        initial_point: Whether the seed point is part of the output

    Output:
        progress_interval: Accepted points between verbose progress lines
        verbose: Print progress while sampling
    """
    # Sampling
    max_attempts: int = 30
    radius_fraction: float = 1.0
    initial_point: InitialPoint = InitialPoint.INCLUDE

    # Output
    progress_interval: int = 100
    verbose: bool = False

    def validate(self) -> None:
        if not _is_int(self.max_attempts) or self.max_attempts < 1:
            raise InvalidArgumentError(f"max_attempts must be an integer >= 1, got {self.max_attempts!r}")
        if not _is_real(self.radius_fraction) or not 0 < self.radius_fraction <= 1:
            raise InvalidArgumentError(f"radius_fraction must be in (0, 1], got {self.radius_fraction!r}")
        if not isinstance(self.initial_point, InitialPoint):
            raise InvalidArgumentError(f"initial_point must be an InitialPoint, got {self.initial_point!r}")
        if not _is_int(self.progress_interval) or self.progress_interval < 1:
            raise InvalidArgumentError(f"progress_interval must be an integer >= 1, got {self.progress_interval!r}")


@dataclass
class SamplingProgress:
    """Tracks the current state of a sampling run."""
    points_placed: int = 0
    active_points: int = 0
    rounds: int = 0
    starved_points: int = 0

    @property
    def starvation_ratio(self) -> float:
        """Share of rounds that ended with the centre being evicted."""
        return self.starved_points / self.rounds if self.rounds > 0 else 0

    def __str__(self) -> str:
        return f"Placed: {self.points_placed} | Active: {self.active_points} | Rounds: {self.rounds} ({self.starvation_ratio:.0%} starved)"


def validate_arguments(spread, max_radius, seed) -> None:
    """Fail fast on arguments that cannot produce a valid point set."""
    if not _is_real(spread) or not math.isfinite(spread) or spread <= 0:
        raise InvalidArgumentError(f"spread must be a finite number > 0, got {spread!r}")
    if not _is_real(max_radius) or not math.isfinite(max_radius) or max_radius <= 0:
        raise InvalidArgumentError(f"max_radius must be a finite number > 0, got {max_radius!r}")
    if not _is_int(seed):
        raise InvalidArgumentError(f"seed must be an integer, got {seed!r}")
    if seed < 0:
        raise InvalidArgumentError(f"seed must be non-negative, got {seed!r}")


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
