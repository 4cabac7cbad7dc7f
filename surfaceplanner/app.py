"""Main window logic: tab switching and a simulated calibration run."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from surfaceplanner.calibration import RUN_COUNT, CalibrationSession, SampleMode
from surfaceplanner.tracker import Tracker

TAB_NAMES = ("calibration", "measurement")
DEFAULT_POINTS_PER_RUN = 100


class TabController:
    """Tracks the visible tab and follows the tracker's tab requests."""

    def __init__(
        self, tracker: Tracker | None = None, tab_names: Sequence[str] = TAB_NAMES
    ) -> None:
        self.tab_names = tuple(tab_names)
        self.current_index = 0
        if tracker is not None:
            tracker.change_tab.connect(self.change_tab)

    @property
    def current_name(self) -> str:
        """Name of the visible tab."""
        return self.tab_names[self.current_index]

    def change_tab(self, index: int) -> int:
        """Show tab ``index``; indices outside the tabs are ignored.

        Returns the index of the visible tab afterwards.
        """
        if 0 <= index < len(self.tab_names):
            self.current_index = index
        return self.current_index


def run_simulated_calibration(
    points_per_run: int = DEFAULT_POINTS_PER_RUN,
) -> tuple[CalibrationSession, TabController]:
    """Run all calibration measurements on simulated tracker data.

    After analysis the session moves on to the measurement tab. Returns the
    finished session and the tab controller.
    """
    if points_per_run < 0:
        raise ValueError("points_per_run must not be negative")
    tracker = Tracker()
    controller = TabController(tracker)
    session = CalibrationSession(tracker)
    for _ in range(RUN_COUNT):
        session.start_measurement(SampleMode.TIME)
        tracker.send_test_data(points_per_run)
        session.stop_measurement()
    session.continue_to_measurement()
    return session, controller


def main(argv: Sequence[str] | None = None) -> int:
    """Run a simulated calibration and print its log and results."""
    parser = argparse.ArgumentParser(
        prog="surfaceplanner",
        description="Run a simulated repeatability calibration.",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=DEFAULT_POINTS_PER_RUN,
        help="simulated measurements per run",
    )
    args = parser.parse_args(argv)
    if args.points < 0:
        parser.error("--points must not be negative")

    session, controller = run_simulated_calibration(args.points)
    for entry in session.log:
        print(entry)
    print(f"{'Runs':>12}  {'Max difference':>16}  {'Correlation':>12}")
    for result in session.results:
        pair = f"{result.dataset1} & {result.dataset2}"
        print(f"{pair:>12}  {result.max_diff:>16g}  {result.correlation:>12g}")
    print(f"Current tab: {controller.current_name}")
    return 0