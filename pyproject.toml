[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archery"
version = "0.1.0"
description = "A small 2D archery game: aim a bow, charge a shot and hit the target past a moving barrier."
requires-python = ">=3.10"
keywords = ["game", "archery", "pygame", "arcade", "physics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
archery = "archery.game:main"

[tool.hatch.build.targets.wheel]
packages = ["archery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
