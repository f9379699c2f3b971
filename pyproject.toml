[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceshoot"
version = "0.2.0"
description = "A small vertical space shooter: dodge enemy fire, shoot down ships and rack up points."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "shmup", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
spaceshoot = "spaceshoot.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceshoot"]

[tool.pytest.ini_options]
addopts = "-ra"
