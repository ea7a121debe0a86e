[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osdecoder"
version = "0.1.0"
description = "Ordered statistics decoding of binary linear block codes, with an AWGN word error rate simulator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "osd",
    "ordered statistics decoding",
    "error correcting codes",
    "linear block codes",
    "gf2",
    "awgn",
    "bpsk",
    "soft decision decoding",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osd = "osdecoder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["osdecoder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
