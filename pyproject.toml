[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "traktornrekords"
version = "1.0.0"
description = "Convert a Traktor NML collection into a Rekordbox XML collection"
requires-python = ">=3.10"
dependencies = []
keywords = ["traktor", "rekordbox", "nml", "dj", "collection", "converter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
traktornrekords = "traktornrekords.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["traktornrekords"]

[tool.pytest.ini_options]
addopts = "-ra"
