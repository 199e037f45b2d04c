[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyrunner"
version = "0.1.0"
description = "A side-scrolling runner game played on text-file tile maps"
requires-python = ">=3.10"
keywords = ["game", "runner", "platformer", "side-scrolling", "pygame", "tile-map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
skyrunner = "skyrunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skyrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
