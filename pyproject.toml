[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "img2uniscr"
version = "0.1.0"
description = "Show images in the terminal using coloured Unicode half-block characters"
requires-python = ">=3.10"
keywords = ["terminal", "image", "viewer", "curses", "unicode", "half-block"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
img2uniscr = "img2uniscr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["img2uniscr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
