"""Comparison of repeated elevation profiles.

Each profile is a sequence of ``(distance, elevation)`` points ordered by
distance. Profiles are resampled onto a shared set of distances and then
compared pairwise by their largest elevation difference and by their
Pearson correlation.
"""

from __future__ import annotations

import bisect
import itertools
import math
from collections.abc import Sequence
from dataclasses import dataclass

Point = tuple[float, float]

EXPECTED_DATASETS = 3


class AnalysisError(ValueError):
    """Raised when elevation data cannot be analysed."""


@dataclass(frozen=True)
class PairResult:
    """Comparison of two profiles, numbered from 1."""

    dataset1: int
    dataset2: int
    max_diff: float
    correlation: float


def interpolate_elevation(
    data: Sequence[Point], distances: Sequence[float]
) -> list[float]:
    """Linearly interpolate the elevation of ``data`` at each distance.

    Distances before the first point take its elevation, distances after the
    last point take the last elevation. Empty data gives an empty list.
    """
    if not data:
        return []

    xs = [x for x, _ in data]
    first_elevation = data[0][1]
    last_elevation = data[-1][1]

    elevations = []
    for dist in distances:
        index = bisect.bisect_left(xs, dist)
        if index == 0:
            elevations.append(first_elevation)
        elif index == len(data):
            elevations.append(last_elevation)
        else:
            x1, y1 = data[index - 1]
            x2, y2 = data[index]
            ratio = (dist - x1) / (x2 - x1)
            elevations.append(y1 + ratio * (y2 - y1))
    return elevations


def max_elevation_difference(
    elev1: Sequence[float], elev2: Sequence[float]
) -> float:
    """Largest absolute difference between matching elevations.

    Sequences of different lengths give 0.0.
    """
    if len(elev1) != len(elev2):
        return 0.0
    return max((abs(a - b) for a, b in zip(elev1, elev2)), default=0.0)


def correlation(elev1: Sequence[float], elev2: Sequence[float]) -> float:
    """Pearson correlation coefficient of two elevation sequences.

    Returns 0.0 when the lengths differ, when there are fewer than two
    values, or when either sequence has no variance.
    """
    if len(elev1) != len(elev2) or len(elev1) < 2:
        return 0.0

    mean1 = sum(elev1) / len(elev1)
    mean2 = sum(elev2) / len(elev2)

    covariance = 0.0
    variance1 = 0.0
    variance2 = 0.0
    for a, b in zip(elev1, elev2):
        diff1 = a - mean1
        diff2 = b - mean2
        covariance += diff1 * diff2
        variance1 += diff1 * diff1
        variance2 += diff2 * diff2

    if variance1 == 0.0 or variance2 == 0.0:
        return 0.0
    return covariance / (math.sqrt(variance1) * math.sqrt(variance2))


def analyze_elevation_data(
    elevation_data: Sequence[Sequence[Point]],
) -> list[PairResult]:
    """Compare each pair of the three profiles.

    All distances of all profiles, with consecutive repeats dropped, form
    the shared sampling grid. Results come in the order (1, 2), (1, 3),
    (2, 3).
    """
    if len(elevation_data) != EXPECTED_DATASETS:
        raise AnalysisError("Expected 3 sets of elevation data")

    all_distances = [
        distance
        for distance, _ in itertools.groupby(
            x for dataset in elevation_data for x, _ in dataset
        )
    ]

    try:
        resampled = [
            interpolate_elevation(dataset, all_distances)
            for dataset in elevation_data
        ]
        return [
            PairResult(
                i + 1,
                j + 1,
                max_elevation_difference(resampled[i], resampled[j]),
                correlation(resampled[i], resampled[j]),
            )
            for i, j in itertools.combinations(range(EXPECTED_DATASETS), 2)
        ]
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise AnalysisError(f"Analysis error: {exc}") from exc