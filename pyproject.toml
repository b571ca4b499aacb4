[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wristui"
version = "0.1.0"
description = "A small tile-and-widget user interface toolkit for 240x240 wristwatch screens, with gesture recognition and a software framebuffer."
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "widgets", "framebuffer", "touch", "gestures", "smartwatch", "tiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wristui"]

[tool.hatch.build.targets.sdist]
include = ["wristui", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
