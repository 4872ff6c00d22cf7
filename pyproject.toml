[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "veriyapilari"
version = "0.1.0"
description = "Data-structure exercises: digit-list averages, stack-fed binary search trees, and a radix-sorted tissue/organ/organism simulation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "stack",
    "queue",
    "binary search tree",
    "radix sort",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest>=7"]

[project.scripts]
veriyapilari-listeler = "veriyapilari.listeler:main"
veriyapilari-yigin-agac = "veriyapilari.yigin_agac:main"
veriyapilari-organizma = "veriyapilari.simulasyon:main"

[tool.hatch.build.targets.wheel]
packages = ["veriyapilari"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
