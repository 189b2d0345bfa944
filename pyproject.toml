[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpkit"
version = "0.1.0"
description = "A small HTTP command-line client, an HTML-to-Markdown page scraper and a few short demo programs"
requires-python = ">=3.10"
dependencies = [
    "requests",
    "termcolor",
]
keywords = ["http", "cli", "json", "markdown", "scraper"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
httpkit-httpie = "httpkit.httpie:main"
httpkit-scrape = "httpkit.scrape:main"
httpkit-scrape-default = "httpkit.scrape:main_default"
httpkit-event = "httpkit.event:main"
httpkit-fib = "httpkit.fib:main"
httpkit-func-exam = "httpkit.func_exam:main"
httpkit-pi = "httpkit.pi:main"

[tool.hatch.build.targets.wheel]
packages = ["httpkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
