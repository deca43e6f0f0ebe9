[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zimble"
version = "0.1.0"
description = "A small HTTP quiz duel server: two players, a bank of questions, scores kept in memory."
requires-python = ">=3.10"
keywords = ["quiz", "duel", "game", "flask", "trivia"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zimble-server = "zimble.server:main"

[tool.hatch.build.targets.wheel]
packages = ["zimble"]

[tool.pytest.ini_options]
addopts = "-ra"
