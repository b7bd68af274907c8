[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agentui"
version = "0.1.0"
description = "Terminal user interface building blocks for a chat-driven coding agent"
requires-python = ">=3.10"
keywords = ["tui", "terminal", "autocomplete", "markdown", "chat", "agent"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]
dependencies = [
    "rich",
    "markdown-it-py",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["agentui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
