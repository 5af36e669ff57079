[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twoeleven"
version = "0.1.0"
description = "A 2048 sliding-tile puzzle game for the desktop"
requires-python = ">=3.10"
keywords = ["2048", "puzzle", "game", "pygame", "sliding tiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
twoeleven = "twoeleven.app:main"

[tool.hatch.build.targets.wheel]
packages = ["twoeleven"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
