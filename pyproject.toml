[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkpath"
version = "0.1.0"
description = "Resolve local links found in documents into absolute paths and file URLs for link checking"
requires-python = ">=3.10"
dependencies = []
keywords = ["links", "link-checker", "paths", "urls", "fragments", "file-url"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management :: Link Checking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
