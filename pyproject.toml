[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "respwire"
version = "0.1.0"
description = "Parser and serializer for the RESP2 wire protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["resp", "resp2", "protocol", "parser", "serializer"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
respwire-example = "respwire.example:main"

[tool.hatch.build.targets.wheel]
packages = ["respwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
