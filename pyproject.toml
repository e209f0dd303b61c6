[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autocorrect"
version = "0.1.0"
description = "Dictionary-based spelling correction with a small web front end"
requires-python = ">=3.10"
keywords = ["spellcheck", "spelling", "autocorrect", "edit-distance", "levenshtein", "wsgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = [
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
autocorrect = "autocorrect.server:main"

[tool.hatch.build.targets.wheel]
packages = ["autocorrect"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
