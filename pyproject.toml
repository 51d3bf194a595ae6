[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "awkit"
version = "0.1.0"
description = "Activity event transforms and datastore syncing for time-tracking data"
requires-python = ">=3.11"
dependencies = [
    "platformdirs",
]
keywords = ["activity", "time-tracking", "events", "sync", "transform", "heartbeat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["awkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
