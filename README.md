# surfaceplanner

Tools for checking how repeatable a surface profile measurement is.

A calibration consists of three measurement runs along the same track. Each
run records points `(x, y, z)`. The distance travelled along the track becomes
the horizontal axis of an elevation profile, with `z` as the elevation. Once
the third run ends, the profiles are resampled onto a shared set of distances
by linear interpolation. For every pair of runs (1 & 2, 1 & 3, 2 & 3) the
package reports:

- the largest absolute elevation difference between the two runs, and
- the Pearson correlation coefficient of their elevations.

Only the standard library is needed at run time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
surfaceplanner [--points N]
```

This runs a simulated calibration. Three runs are fed with `N` synthetic
tracker measurements each (100 by default). The command prints the session
log, a table of maximum difference and correlation for each pair of runs, and
the name of the tab the session finished on. A negative `--points` value is
rejected.

## Library use

### Analysis: `surfaceplanner.analysis`

```python
from surfaceplanner.analysis import analyze_elevation_data

profiles = [
    [(0.0, 1.00), (1.0, 1.10), (2.0, 1.20)],
    [(0.0, 1.02), (1.0, 1.09), (2.0, 1.22)],
    [(0.0, 0.98), (1.0, 1.11), (2.0, 1.19)],
]
for result in analyze_elevation_data(profiles):
    print(result.dataset1, result.dataset2, result.max_diff, result.correlation)
```

Each profile is a sequence of `(distance, elevation)` points ordered by
distance. `analyze_elevation_data` returns three `PairResult` values. If the
input does not hold exactly three profiles, it raises `AnalysisError`, a
subclass of `ValueError`.

The building blocks can also be used on their own:

- `interpolate_elevation(data, distances)` gives the elevation at each
  distance. Distances before the first point take the first elevation, and
  distances after the last point take the last elevation.
- `max_elevation_difference(elev1, elev2)` returns 0.0 when the lengths
  differ.
- `correlation(elev1, elev2)` returns 0.0 in three cases: the lengths differ,
  there are fewer than two values, or either sequence is constant.

### Calibration session: `surfaceplanner.calibration`

`CalibrationSession(tracker=None, clock=datetime.now)` holds the state of a
three-run calibration. When a `Tracker` is given, the session listens to its
`measurement_arrived` signal.

- `start_measurement(mode, separation)` begins the next run. `mode` is a
  `SampleMode`, either `TIME` (unit `ms`, default separation 100) or
  `DISTANCE` (unit `m`, default 0.1). A separation that cannot be read as a
  number falls back to the mode's default.
- `add_point(x, y, z)` records a point. It does nothing while no run is
  active.
- `stop_measurement()` ends the run. After the third run it analyses the
  data and returns the pairwise results. Before that it returns an empty
  list.
- `analyze()` compares the recorded runs. On success it stores the results in
  `results` and sets `can_continue`.
- `refresh()` clears the recorded data and resets the axis ranges. It is only
  allowed once all runs are done.
- `continue_to_measurement()` emits `change_tab` with index 1 on the tracker,
  then returns 1. It is only allowed after analysis.

A step taken out of order raises `CalibrationError`.

The session also records:

- its data in `elevation_data`, `plan_data` and `points_3d`;
- the chart ranges as `AxisRange` values;
- a log of `LogEntry` records, printed as `[HH:MM:SS] message`.

`inclination_indicator(x, y)` returns the bubble colour and its rectangle
`(left, top, width, height)`. The colour is `"red"` when the offset exceeds
10 and `"green"` otherwise.

### Tracker events: `surfaceplanner.tracker`

`Tracker` carries five `Signal` objects:

- `position_changed`
- `measurement_arrived`
- `image_arrived`
- `inclination_changed`
- `change_tab`

A `Signal` calls its connected callbacks in the order they were connected.

`Tracker.send_test_data(count)` emits the next `count` synthetic measurements
and returns them. Each call continues the same sweep. `test_data_points()`
yields that sweep as an endless generator. It steps x by 0.1 across 0..10 and
y by 0.1 across 0..3, at height 1. `MeasurementProfile` lists the tracker's
measurement profiles.

### Other modules

`surfaceplanner.datameasurement.generate_random_points(count, rng)` returns
`count` points, each coordinate uniform in [-5, 5).

`surfaceplanner.app.TabController` follows `change_tab` requests and ignores
indices outside its tabs. `run_simulated_calibration(points_per_run)` runs the
whole calibration on synthetic data.

## What this package does not do

- It does not connect to a physical laser tracker. All measurements come
  either from the synthetic feed or from calls to `add_point`.
- Nothing in the package emits the position, image and inclination signals.
  Only your own code can do that.
- There is no graphical window. The package tracks axis ranges and the bubble
  indicator as values, but draws no charts, 3D scatter view or level display.