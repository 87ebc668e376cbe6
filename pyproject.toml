[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "startraveller"
version = "0.1.0"
description = "A turn-based space trading game played from the terminal, with an administrative console for managing players."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "space", "trading", "turn-based", "terminal", "hex map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
startraveller = "startraveller.game:main"
startraveller-admin = "startraveller.admin:main"

[tool.hatch.build.targets.wheel]
packages = ["startraveller"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
