"""Laser tracker event hub and simulated measurement feed."""

from __future__ import annotations

import enum
import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

TEST_START = 0.0
TEST_Z = 1.0
TEST_DX = 0.1
TEST_DY = 0.1
TEST_X_LIMIT = 10.0
TEST_Y_LIMIT = 3.0


class Signal:
    """A list of callbacks invoked in connection order."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register ``slot`` to be called on every emission."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove ``slot``; raises ValueError if it is not connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)


class MeasurementProfile(enum.IntEnum):
    """Measurement profiles the tracker can run."""

    STATIONARY = 0
    CONTINUOUS_TIME = 1
    CONTINUOUS_DISTANCE = 2


def test_data_points() -> Iterator[tuple[float, float, float]]:
    """Endless simulated measurements sweeping a 10 x 3 strip at height 1.

    x advances by 0.1; when it passes 10 it returns to 0 and y advances by
    0.1; when y passes 3 it returns to 0.
    """
    x = TEST_START
    y = TEST_START
    while True:
        yield (x, y, TEST_Z)
        x += TEST_DX
        if x > TEST_X_LIMIT:
            y += TEST_DY
            x = TEST_START
        if y > TEST_Y_LIMIT:
            y = TEST_START


test_data_points.__test__ = False  # type: ignore[attr-defined]


@dataclass
class Tracker:
    """Signals carrying tracker events to their listeners."""

    position_changed: Signal = field(default_factory=Signal)
    measurement_arrived: Signal = field(default_factory=Signal)
    image_arrived: Signal = field(default_factory=Signal)
    inclination_changed: Signal = field(default_factory=Signal)
    change_tab: Signal = field(default_factory=Signal)
    _feed: Iterator[tuple[float, float, float]] = field(
        default_factory=test_data_points, init=False, repr=False
    )

    def send_test_data(self, count: int) -> list[tuple[float, float, float]]:
        """Emit the next ``count`` simulated measurements and return them.

        Successive calls continue the same sweep.
        """
        if count < 0:
            raise ValueError("count must not be negative")
        points = list(itertools.islice(self._feed, count))
        for point in points:
            self.measurement_arrived.emit(*point)
        return points