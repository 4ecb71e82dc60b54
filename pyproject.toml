[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpgdev"
version = "0.1.0"
description = "Earn role-playing style XP for the developer commands in your shell history"
requires-python = ">=3.10"
dependencies = []
keywords = ["xp", "gamification", "shell", "zsh", "history", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpd = "rpgdev.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rpgdev"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
