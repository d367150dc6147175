[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pnmgrid"
version = "0.1.0"
description = "Two-dimensional grids and PNM tools: a sudoku solution checker and a black-edge remover for bitmaps"
requires-python = ">=3.10"
dependencies = []
keywords = ["pnm", "pbm", "pgm", "ppm", "sudoku", "bitmap", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pnmgrid-sudoku = "pnmgrid.sudoku:main"
pnmgrid-unblackedges = "pnmgrid.unblackedges:main"

[tool.hatch.build.targets.wheel]
packages = ["pnmgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
