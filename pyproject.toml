[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fynext"
version = "0.1.0"
description = "Toolkit-independent layouts, Adwaita colours, widget models and data bindings for user interfaces"
requires-python = ">=3.10"
keywords = [
    "gui",
    "layout",
    "responsive",
    "theme",
    "adwaita",
    "calendar",
    "autocomplete",
    "data-binding",
    "json",
    "mqtt",
    "websocket",
    "password",
]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "paho-mqtt",
    "websocket-client",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fynext-adwaita-gen = "fynext.theme.icongen:main"

[tool.hatch.build.targets.wheel]
packages = ["fynext"]

[tool.hatch.build.targets.sdist]
include = [
    "fynext",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
