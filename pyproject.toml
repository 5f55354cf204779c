[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morphosis"
version = "0.1.0"
description = "Sample 4D quaternion Julia and Mandelbrot sets and derive their constants from matrix files"
requires-python = ">=3.10"
dependencies = []
keywords = ["fractal", "julia set", "quaternion", "mandelbrot", "marching cubes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
morphosis = "morphosis.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["morphosis"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
