[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpnlang"
version = "0.1.0"
description = "Interpreter for a small C-like language, compiled through an LL(1) parser to reverse Polish notation"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "rpn", "reverse-polish-notation", "ll1", "parser", "lexer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpnlang = "rpnlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rpnlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
