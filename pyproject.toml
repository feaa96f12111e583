[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coordalt"
version = "0.1.0"
description = "Fetch altitude/elevation for geographical coordinates of planet Earth."
requires-python = ">=3.10"
keywords = ["geo", "elevation", "altitude", "coordinates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "requests>=2.28",
    "platformdirs>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
coordalt = "coordalt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coordalt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
