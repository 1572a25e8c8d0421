[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squeezer"
version = "0.1.0"
description = "Side chain, gain stages, a Chebyshev filter stage and the parameter set of a dynamic range compressor, in pure Python."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "compressor", "dynamics", "dsp", "side-chain", "chebyshev"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["squeezer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
