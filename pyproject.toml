[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beltworks"
version = "0.1.0"
description = "Small data-structure exercises and line-oriented query processors: an event database with a condition language, a transit catalog, hotel booking statistics and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "query-language",
    "text-editor",
    "merge-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
beltworks-events = "beltworks.events_cli:main"
beltworks-hotels = "beltworks.hotels:main"
beltworks-transit = "beltworks.transit_requests:main"

[tool.hatch.build.targets.wheel]
packages = ["beltworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
