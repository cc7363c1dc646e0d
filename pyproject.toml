[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fswpoll"
version = "1.0.0"
description = "Portable, stat-based file change monitoring with sessions, path filters and event type filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "watch", "monitor", "poll", "file changes", "stat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fswpoll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
