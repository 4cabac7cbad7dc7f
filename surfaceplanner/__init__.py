"""Repeatability calibration and analysis of surface profile measurements."""

__version__ = "0.1.0"

__all__ = ["analysis", "tracker", "calibration", "datameasurement", "app"]