[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitguard"
version = "0.1.0"
description = "An arcade game: guard a planet from a ring of incoming meteors with an orbiting ship."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "shooter", "space"]
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
orbitguard = "orbitguard.main:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
