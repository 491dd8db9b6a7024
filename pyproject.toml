[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mangatui"
version = "0.1.0"
description = "Chapter navigation, chapter-list state and key bindings for a terminal manga reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["manga", "chapters", "volumes", "downloads", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mangatui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
