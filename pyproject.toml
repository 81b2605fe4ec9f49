[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "n8lang"
version = "0.1.0"
description = "Tokenizer, parser and standard-library helpers for the N8 scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["n8", "parser", "tokenizer", "syntax-tree", "scripting-language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["n8lang"]

[tool.pytest.ini_options]
addopts = "-ra"
