[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "splashraster"
version = "0.1.0"
description = "Rasterizer building blocks: paths, bitmaps, rectangular clipping, halftone screens, graphics state and glyph caching"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "bitmap", "halftone", "clipping", "path", "glyph cache", "pnm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["splashraster*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
