[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wthr"
version = "0.1.0"
description = "Interactive prompt for exploring hourly temperature datasets, with text plots, candlestick charts and seasonal predictions."
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "temperature", "timeseries", "terminal", "cli", "forecast"]
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
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wthr = "wthr.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wthr"]

[tool.pytest.ini_options]
addopts = "-ra"
