[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "changelog_keeper"
version = "0.1.0"
description = "Read and write changelog files using the Keep a Changelog format"
requires-python = ">=3.10"
keywords = ["keep-a-changelog", "changelog", "markdown", "release-notes", "semver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "semver>=3",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "freezegun>=1.2",
]

[tool.hatch.build.targets.wheel]
packages = ["changelog_keeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
