[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringlwe"
version = "0.1.0"
description = "Ring-LWE building blocks: NTT parameters, NTT-form polynomials, error sampling, lazy accumulation and compressed selection vectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["rlwe", "lattice", "ntt", "homomorphic encryption", "polynomial", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ringlwe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
