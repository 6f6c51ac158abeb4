[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpsnmea"
version = "0.1.0"
description = "Decode NMEA GGA and RMC sentences from a GPS receiver and format them for a two-line display"
requires-python = ">=3.10"
dependencies = []
keywords = ["gps", "nmea", "gga", "rmc", "ring buffer", "gnss", "lcd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gpsnmea-display = "gpsnmea.display:main"

[tool.hatch.build.targets.wheel]
packages = ["gpsnmea"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
