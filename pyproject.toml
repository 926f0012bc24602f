[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xrpcuri"
version = "0.1.0"
description = "Split, join, normalize, validate and resolve XRPC-URIs (xrpc://authority/nsid?query#fragment)."
requires-python = ">=3.10"
dependencies = []
keywords = ["xrpc", "uri", "nsid", "atproto", "url"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xrpcuri"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
