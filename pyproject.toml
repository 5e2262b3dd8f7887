[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lawnwar"
version = "1.0.0"
description = "A small lane-defence game: plants on a lawn grid shoot at zombies walking down the rows."
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "pygame", "entity-component", "lane-defense"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lawnwar = "lawnwar.game:main"
lawnwar-viewer = "lawnwar.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["lawnwar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
