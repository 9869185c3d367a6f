[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcbpaths"
version = "2.5.0"
description = "Building blocks for turning PCB artwork into CNC toolpaths: unit parsing, drill selection, tool settings, tiling, path trimming and arc sampling."
requires-python = ">=3.10"
keywords = ["pcb", "gcode", "cnc", "milling", "toolpath", "isolation routing", "drilling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pcbpaths"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
