[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hazelengine"
version = "0.1.0"
description = "A small application framework with a desktop window, typed events, key codes and a renderer abstraction"
requires-python = ">=3.10"
keywords = ["game-engine", "events", "window", "pygame", "framework"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hazel-sandbox = "hazelengine.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["hazelengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
