[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainmap-ht"
version = "0.1.0"
description = "A string-keyed hash table with separate chaining, Jenkins one-at-a-time hashing and load-factor driven resizing"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashtable", "hashmap", "separate chaining", "jenkins hash", "data structures"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
chainmap-ht-demo = "chainmap_ht.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["chainmap_ht"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
