[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probemap"
version = "0.1.0"
description = "A small open-addressing hash map with linear probing, a word counter and a graded self-check"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash map", "hash table", "linear probing", "open addressing", "word count"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
probemap-wordcount = "probemap.wordcount:main"
probemap-selfcheck = "probemap.selfcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["probemap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
