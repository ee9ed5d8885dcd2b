[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textreload"
version = "0.1.0"
description = "Text auto-correction tool: fixes spacing, punctuation, quotes and articles, and applies inline (hex), (bin), (up), (low) and (cap) commands."
requires-python = ">=3.10"
keywords = ["text", "formatting", "punctuation", "auto-correct", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textreload = "textreload.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["textreload"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
