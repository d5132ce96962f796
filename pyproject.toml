[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nitroterm"
version = "0.1.0a2"
description = "A terminal tool for semantic version bumps, git release tagging and update checks"
requires-python = ">=3.10"
keywords = ["release", "versioning", "semver", "git", "terminal", "automation"]
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
    "Topic :: Software Development :: Build Tools",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "semver>=3.0",
    "termcolor>=2.3",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[project.scripts]
nitroterm = "nitroterm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nitroterm"]

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
