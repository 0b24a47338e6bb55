[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jestingjaguar"
version = "0.1.0"
description = "Escape {{ }} template delimiters in files so they are emitted literally instead of interpolated"
requires-python = ">=3.10"
keywords = ["template", "escape", "delimiters", "text", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jestingjaguar = "jestingjaguar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jestingjaguar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
