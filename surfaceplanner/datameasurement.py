"""Point cloud for the surface measurement view."""

from __future__ import annotations

import random

DEFAULT_POINT_COUNT = 100
POINT_LOW = -5.0
POINT_HIGH = 5.0

AXIS_RANGES: dict[str, tuple[float, float]] = {
    "x": (-10.0, 10.0),
    "y": (-5.0, 5.0),
    "z": (-10.0, 10.0),
}
CAMERA_POSITION = (0.0, 0.0, 30.0)

Point3D = tuple[float, float, float]


def generate_random_points(
    count: int = DEFAULT_POINT_COUNT, rng: random.Random | None = None
) -> list[Point3D]:
    """Return ``count`` points with each coordinate uniform in [-5, 5)."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    span = POINT_HIGH - POINT_LOW

    def coordinate() -> float:
        return rng.random() * span + POINT_LOW

    return [(coordinate(), coordinate(), coordinate()) for _ in range(count)]