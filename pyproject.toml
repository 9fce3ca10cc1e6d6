[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nirremote"
version = "1.0.0"
description = "Capture and decode infrared remote-control pulse trains, with Sony protocol decoding and debug formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["infrared", "ir", "remote", "sony", "decoder", "pulses"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nirremote"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
