[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "mcoptions"
version = "0.1.0"
description = "Monte Carlo pricing of European options under Black-Scholes dynamics"
requires-python = ">=3.10"
dependencies = []
keywords = ["monte carlo", "options", "pricing", "derivatives", "black-scholes", "finance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mcoptions-basic = "mcoptions.cli_basic:main"
mcoptions-vanilla = "mcoptions.cli_vanilla:main"
mcoptions-stats = "mcoptions.cli_stats:main"

[tool.setuptools.packages.find]
include = ["mcoptions*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
