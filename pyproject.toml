[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Worked practice exercises in strings, numbers and data structures, plus two small JSON web services."
requires-python = ">=3.10"
keywords = [
    "exercises",
    "practice",
    "kata",
    "ciphers",
    "checksums",
    "flask",
    "rest",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Education",
]
dependencies = [
    "flask",
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
drillbook-bookshelf = "drillbook.bookshelf.server:main"
drillbook-employees = "drillbook.employees:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.pytest.ini_options]
addopts = "-ra"
