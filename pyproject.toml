[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astralib"
version = "0.1.0"
description = "IP and socket addresses, DNS lookups, HTTP/1.1 message parsing and formatting, and small string, array, IO and system helpers."
requires-python = ">=3.10"
keywords = ["ip-address", "dns", "http", "parsing", "stdlib", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Internet :: Name Service (DNS)",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["astralib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
