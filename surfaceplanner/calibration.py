"""Repeatability calibration: three repeated elevation runs over one path.

A session collects three measurement runs from the tracker. Each run
records elevation against travelled distance, the plan position and the
raw 3D point. When the third run ends the runs are compared pairwise.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime

from surfaceplanner.analysis import AnalysisError, PairResult, analyze_elevation_data
from surfaceplanner.tracker import MeasurementProfile, Tracker

RUN_COUNT = 3
BUBBLE_RADIUS = 36
INCLINATION_LIMIT = 10.0
MEASUREMENT_TAB = 1

Color = tuple[int, int, int]

RUN_COLORS: tuple[Color, ...] = ((249, 231, 167), (239, 118, 123), (67, 163, 239))
DEFAULT_LOG_COLOR: Color = (33, 33, 33)


class CalibrationError(RuntimeError):
    """Raised when a calibration step is requested out of order."""


class SampleMode(enum.Enum):
    """How measurements are spaced: by time or by travelled distance."""

    TIME = 0
    DISTANCE = 1

    @property
    def profile(self) -> MeasurementProfile:
        """Tracker profile that samples in this mode."""
        return MeasurementProfile(self.value + 1)

    @property
    def unit(self) -> str:
        """Unit of the separation value."""
        return "m" if self is SampleMode.DISTANCE else "ms"

    @property
    def default_separation(self) -> float:
        """Separation used when none, or an unreadable one, is given."""
        return 0.1 if self is SampleMode.DISTANCE else 100.0


@dataclass(frozen=True)
class AxisRange:
    """Visible range of one chart axis."""

    min: float
    max: float

    def __contains__(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class LogEntry:
    """One line of the session log."""

    timestamp: datetime
    message: str
    color: Color = DEFAULT_LOG_COLOR

    def __str__(self) -> str:
        return f"[{self.timestamp:%H:%M:%S}] {self.message}"


def inclination_indicator(
    x: float, y: float
) -> tuple[str, tuple[float, float, float, float]]:
    """Colour and bounding rectangle of the level bubble at offset (x, y).

    The bubble is red when its offset from the centre exceeds the limit and
    green otherwise. The rectangle is ``(left, top, width, height)``.
    """
    color = "red" if math.hypot(x, y) > INCLINATION_LIMIT else "green"
    half = BUBBLE_RADIUS // 2
    return color, (x - half, y - half, BUBBLE_RADIUS, BUBBLE_RADIUS)


def _parse_separation(value: object, default: float) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _default_elevation_axes() -> tuple[AxisRange, AxisRange]:
    return AxisRange(0.0, 30.0), AxisRange(0.0, 2.0)


def _default_plan_axes() -> tuple[AxisRange, AxisRange]:
    return AxisRange(0.0, 30.0), AxisRange(0.0, 2.0)


class CalibrationSession:
    """State of a three-run repeatability calibration."""

    def __init__(
        self,
        tracker: Tracker | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.tracker = tracker
        self._clock = clock
        self.is_measuring = False
        self.measure_num = 0
        self.mode = SampleMode.TIME
        self.separation = SampleMode.TIME.default_separation
        self.log: list[LogEntry] = []
        self.results: list[PairResult] = []
        self.can_continue = False
        self._reset_data()
        if tracker is not None:
            tracker.measurement_arrived.connect(self.add_point)

    def _reset_data(self) -> None:
        self.elevation_data: list[list[tuple[float, float]]] = [[] for _ in range(RUN_COUNT)]
        self.plan_data: list[list[tuple[float, float]]] = [[] for _ in range(RUN_COUNT)]
        self.points_3d: list[list[tuple[float, float, float]]] = [[] for _ in range(RUN_COUNT)]
        self.elevation_x_axis, self.elevation_y_axis = _default_elevation_axes()
        self.plan_x_axis, self.plan_y_axis = _default_plan_axes()
        self._point_num = 0
        self._current_distance = 0.0
        self._last: tuple[float, float] = (0.0, 0.0)
        self._bounds: list[float] | None = None  # min_x, max_x, min_y, max_y

    def _append_log(self, message: str, color: Color = DEFAULT_LOG_COLOR) -> None:
        self.log.append(LogEntry(self._clock(), message, color))

    def start_measurement(
        self, mode: SampleMode = SampleMode.TIME, separation: object = None
    ) -> None:
        """Begin the next run, sampling in ``mode`` every ``separation``."""
        if self.is_measuring:
            raise CalibrationError("a measurement is already running")
        if self.measure_num >= RUN_COUNT:
            raise CalibrationError("all measurements are already complete")
        self._point_num = 0
        self._current_distance = 0.0
        self.mode = mode
        self.separation = _parse_separation(separation, mode.default_separation)
        self.is_measuring = True
        self._append_log(
            f"Start: measurement {self.measure_num + 1}", RUN_COLORS[self.measure_num]
        )

    def stop_measurement(self) -> list[PairResult]:
        """End the current run; after the last run, analyse all runs.

        Returns the pairwise results once all runs are done, otherwise an
        empty list.
        """
        if not self.is_measuring:
            raise CalibrationError("no measurement is running")
        self.is_measuring = False
        self.measure_num += 1
        self._append_log(
            f"Measurement {self.measure_num} finished",
            RUN_COLORS[self.measure_num - 1],
        )
        if self.measure_num < RUN_COUNT:
            return []
        self._append_log("All measurements complete, waiting for report...")
        return self.analyze()

    def add_point(self, x: float, y: float, z: float) -> None:
        """Record a tracker measurement in the running measurement."""
        if not self.is_measuring or self.measure_num >= RUN_COUNT:
            return

        if self._point_num:
            last_x, last_y = self._last
            self._current_distance += math.hypot(x - last_x, y - last_y)
            if self.measure_num == 0:
                self.elevation_x_axis = AxisRange(0.0, self._current_distance + 1)
        if self._bounds is None:
            self._bounds = [x, x, y, y]
            self.elevation_y_axis = AxisRange(z - 4, z + 4)
            self.plan_x_axis = AxisRange(x - 1, x + 1)
            self.plan_y_axis = AxisRange(y - 1, y + 1)
        self._point_num += 1
        self._last = (x, y)

        bounds = self._bounds
        bounds[0] = min(bounds[0], x)
        bounds[1] = max(bounds[1], x)
        bounds[2] = min(bounds[2], y)
        bounds[3] = max(bounds[3], y)
        min_x, max_x, min_y, max_y = bounds

        if min_x < self.plan_x_axis.min + 0.5 or max_x > self.plan_x_axis.max - 0.5:
            self.plan_x_axis = replace(self.plan_x_axis, min=min_x - 1, max=max_x + 1)
        if min_y < self.plan_y_axis.min + 0.5 or max_y > self.plan_y_axis.max - 0.5:
            self.plan_y_axis = replace(self.plan_y_axis, min=min_y - 1, max=max_y + 1)

        run = self.measure_num
        self.elevation_data[run].append((self._current_distance, z))
        self.plan_data[run].append((x, y))
        self.points_3d[run].append((x, y, z))

    def analyze(self) -> list[PairResult]:
        """Compare the recorded runs pairwise and keep the results."""
        try:
            results = analyze_elevation_data(self.elevation_data)
        except AnalysisError as exc:
            self._append_log(f"Processing error: {exc}")
            raise
        self.results = results
        self.can_continue = True
        self._append_log("Processing complete")
        return results

    def refresh(self) -> None:
        """Discard the recorded data and reset the chart axes."""
        if self.measure_num < RUN_COUNT:
            raise CalibrationError("measurements are not complete")
        self._reset_data()
        self._append_log("Data cleared")
        self.can_continue = False

    def continue_to_measurement(self) -> int:
        """Ask the window to switch to the measurement tab; returns its index."""
        if not self.can_continue:
            raise CalibrationError("analysis has not finished")
        if self.tracker is not None:
            self.tracker.change_tab.emit(MEASUREMENT_TAB)
        return MEASUREMENT_TAB