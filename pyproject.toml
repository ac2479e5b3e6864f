[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loxlang"
version = "0.1.0"
description = "A tokenizer and expression parser for the Lox language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lox", "interpreter", "lexer", "parser", "tokenizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loxlang = "loxlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loxlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
