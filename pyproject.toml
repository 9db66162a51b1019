[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterposter"
version = "0.1.0"
description = "Print-filter building blocks: job option resolution from PPD data and poster-style splitting of raster pages into sub-pages"
requires-python = ">=3.10"
dependencies = []
keywords = ["printing", "raster", "ppd", "poster", "filter", "watermark", "maintenance"]
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
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rasterposter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
