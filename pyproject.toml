[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpuri"
version = "1.3.1"
description = "Strict parsing and representation of HTTP request-target URIs and HTTP versions."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "uri", "url", "authority", "scheme", "request-target"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["httpuri"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
