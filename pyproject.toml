[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surfaceplanner"
version = "0.1.0"
description = "Repeatability calibration for surface profile measurements: simulated tracker feed, elevation interpolation and pairwise comparison"
requires-python = ">=3.10"
dependencies = []
keywords = ["surveying", "elevation", "calibration", "laser tracker", "profile", "correlation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
surfaceplanner = "surfaceplanner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["surfaceplanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
