[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goterp"
version = "0.1.0"
description = "A toy interpreter front end: lexer, let-statement parser and token-printing prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "lexer", "parser", "repl", "toy-language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
goterp = "goterp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["goterp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
