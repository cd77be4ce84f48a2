[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hubkit"
version = "0.1.0"
description = "Helpers for git remote URLs, SSH config host aliases, git output, branch sync reports and GitHub release formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "github", "ssh-config", "releases", "remotes"]
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
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hubkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
