[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spcompiler"
version = "0.1.0"
description = "Syntax tree nodes, three-address intermediate code, a symbol table and a line-oriented virtual machine for a small teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "intermediate code", "three-address code", "virtual machine", "symbol table", "constant folding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spvm = "spcompiler.vm:main"

[tool.hatch.build.targets.wheel]
packages = ["spcompiler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
