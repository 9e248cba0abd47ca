[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dashrunner"
version = "0.1.0"
description = "A side-scrolling endless runner with tile-map levels, a level editor and a local leaderboard."
requires-python = ">=3.10"
keywords = ["game", "endless-runner", "platformer", "pygame", "tile-map", "level-editor"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dashrunner = "dashrunner.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dashrunner"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
