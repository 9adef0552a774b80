[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionmap"
version = "0.1.0"
description = "Input-agnostic action state for games: button lifecycles, axis descriptions, timing and consumption of actions"
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "actions", "gamepad", "keyboard", "mouse", "games"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["actionmap"]

[tool.pytest.ini_options]
addopts = "-ra"
