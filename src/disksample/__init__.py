"""
disksample - Poisson-disc (blue-noise) point sampling on a disc.

Usage:
    from disksample import generate_points, SamplerConfig

    # Basic usage
    points = generate_points(spread=1.0, max_radius=5.0, seed=42)

    # With configuration
    config = SamplerConfig(max_attempts=3, radius_fraction=0.5, verbose=True)
    points = generate_points(1.0, 5.0, seed=42, config=config)

    # Streaming
    sampler = PoissonDiscSampler(1.0, 5.0, seed=42)
    for x, y in sampler.generate():
        ...

Every returned point lies within max_radius * radius_fraction of the origin,
and no two points are closer than spread.
"""

from .config import (
    GridKey,
    InitialPoint,
    InvalidArgumentError,
    Point,
    SamplerConfig,
    SamplingProgress,
)
from .geometry import (
    DiscGrid,
    in_disc,
    is_valid_position,
    min_pairwise_distance,
    points_to_array,
    to_vector3,
)
from .sampler import PoissonDiscSampler, generate_points

__all__ = [
    "generate_points",
    "PoissonDiscSampler",
    "SamplerConfig",
    "SamplingProgress",
    "InitialPoint",
    "InvalidArgumentError",
    "DiscGrid",
    "in_disc",
    "is_valid_position",
    "min_pairwise_distance",
    "points_to_array",
    "to_vector3",
    "Point",
    "GridKey",
]

__version__ = "0.1.0"
