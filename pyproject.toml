[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heimdall-ui"
version = "0.1.0"
description = "A small pygame-based window and UI component toolkit with buttons, text inputs, sliders, toggles, images and text"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pygame", "ui", "widgets", "gui", "components", "window"]
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
    "Topic :: Software Development :: Libraries :: pygame",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["heimdall_ui"]

[tool.pytest.ini_options]
addopts = "-ra"
