[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bulmakit"
version = "0.1.0"
description = "Build Bulma CSS markup from Python: columns, elements, components and form fields rendered to HTML."
requires-python = ">=3.10"
dependencies = []
keywords = ["bulma", "css", "html", "components", "widgets", "markup"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bulmakit-build = "bulmakit.build:main"

[tool.hatch.build.targets.wheel]
packages = ["bulmakit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
