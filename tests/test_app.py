import pytest

from surfaceplanner.app import TAB_NAMES, TabController, main, run_simulated_calibration
from surfaceplanner.tracker import Tracker


def test_controller_starts_on_first_tab():
    controller = TabController()
    assert controller.current_index == 0
    assert controller.current_name == TAB_NAMES[0]


def test_change_tab_switches():
    controller = TabController()
    assert controller.change_tab(1) == 1
    assert controller.current_name == TAB_NAMES[1]


def test_change_tab_out_of_range_is_ignored():
    controller = TabController()
    controller.change_tab(1)
    assert controller.change_tab(len(TAB_NAMES)) == 1
    assert controller.change_tab(-1) == 1


def test_controller_follows_tracker_signal():
    tracker = Tracker()
    controller = TabController(tracker)
    tracker.change_tab.emit(1)
    assert controller.current_index == 1


def test_simulated_calibration_compares_all_pairs():
    session, controller = run_simulated_calibration(30)
    pairs = [(r.dataset1, r.dataset2) for r in session.results]
    assert pairs == [(1, 2), (1, 3), (2, 3)]
    assert session.measure_num == 3
    assert session.can_continue is True
    assert controller.current_index == 1


def test_simulated_calibration_flat_surface_has_no_difference():
    session, _ = run_simulated_calibration(30)
    for result in session.results:
        assert result.max_diff == 0.0
        assert result.correlation == 0.0


def test_simulated_calibration_records_every_point():
    session, _ = run_simulated_calibration(25)
    assert [len(run) for run in session.elevation_data] == [25, 25, 25]
    assert [len(run) for run in session.points_3d] == [25, 25, 25]


def test_simulated_calibration_zero_points():
    session, _ = run_simulated_calibration(0)
    assert all(run == [] for run in session.elevation_data)
    assert len(session.results) == 3


def test_simulated_calibration_negative_points_raises():
    with pytest.raises(ValueError):
        run_simulated_calibration(-1)


def test_main_prints_log_and_results(capsys):
    assert main(["--points", "10"]) == 0
    out = capsys.readouterr().out
    assert "Processing complete" in out
    assert "1 & 2" in out
    assert "2 & 3" in out
    assert f"Current tab: {TAB_NAMES[1]}" in out


def test_main_rejects_negative_points():
    with pytest.raises(SystemExit):
        main(["--points", "-5"])