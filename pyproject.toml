[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palastro"
version = "0.9.10"
description = "Positional astronomy routines: observer position, refraction, radial velocity corrections, linear fits and orbital elements"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "astronomy",
    "astrometry",
    "refraction",
    "orbital elements",
    "radial velocity",
    "supergalactic",
    "polar motion",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["palastro"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
