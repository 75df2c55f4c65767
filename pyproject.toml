[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uwbtrilat"
version = "0.1.0"
description = "Least-squares trilateration from UWB range measurements, with small vector/matrix helpers and the DW1000 register map"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "trilateration",
    "uwb",
    "least-squares",
    "positioning",
    "ranging",
    "dw1000",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uwbtrilat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
