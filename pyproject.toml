[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable building blocks for concurrency and I/O patterns: resource pools, timed runners, fan-out search, semaphores, feed search and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threads",
    "resource-pool",
    "semaphore",
    "rss",
    "wsgi",
    "patterns",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-wordcount = "patternkit.words:main"
patternkit-pool = "patternkit.pool:main"
patternkit-runner = "patternkit.runner:main"
patternkit-metasearch = "patternkit.metasearch:main"
patternkit-semaphore = "patternkit.semaphore:main"
patternkit-rss = "patternkit.rss:main"
patternkit-serve = "patternkit.handlers:main"
patternkit-pipeline = "patternkit.pipeline:main"
patternkit-counting = "patternkit.counting:main"
patternkit-contacts = "patternkit.contacts:main"
patternkit-logs = "patternkit.logsetup:main"
patternkit-fetch = "patternkit.fetch:main"
patternkit-notify = "patternkit.notify:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
