[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qtwtheme"
version = "0.0.1"
description = "Wallpaper-driven colour palettes, colour helpers and a hover/press animated button model"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["palette", "monet", "wallpaper", "colour", "theme", "animation", "button"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qtwtheme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
