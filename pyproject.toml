[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hevcnal"
version = "0.1.0"
description = "Parsers for H.265/HEVC bitstream syntax structures: profile/tier/level, scaling lists, SEI messages and the SPS 3D extension"
requires-python = ">=3.10"
dependencies = []
keywords = ["h265", "hevc", "nal", "bitstream", "parser", "video", "sei"]
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
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hevcnal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
