[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellsim"
version = "0.1.0"
description = "Building blocks for an artificial-chemistry cell simulation: elements, compounds, hex grids and genetic codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["artificial life", "simulation", "chemistry", "genetics", "hex grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cellsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
