[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediatools"
version = "0.1.0"
description = "Small helpers for video frame extraction with ffmpeg, float pixel image I/O, and terminal control"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["ffmpeg", "ffprobe", "frames", "video", "images", "terminal", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia",
    "Topic :: Multimedia :: Video :: Conversion",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mediatools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
