[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "tinysh"
version = "0.1.0"
description = "A small interactive command shell with pipes, redirections, built-ins and line editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "redirection", "pipe", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinysh = "tinysh.shell:main"

[tool.setuptools.packages.find]
include = ["tinysh*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
