[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nusantara"
version = "0.1.0"
description = "Julian Day Number conversions and Javanese calendar cycles (Pasaran, Saptawara, Wetonan, Pawukon, Windu, Pranata Masa)"
requires-python = ">=3.10"
dependencies = []
keywords = ["calendar", "javanese", "jawa", "weton", "pawukon", "nusantara", "indonesia", "julian-day"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nusantara"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
