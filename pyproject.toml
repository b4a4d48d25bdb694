[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pilfflonk"
version = "0.0.1"
description = "Polynomial arithmetic, number-theoretic transforms and a Keccak-256 Fiat-Shamir transcript over the BN128 scalar field"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["zero-knowledge", "fflonk", "bn128", "ntt", "polynomial", "keccak", "transcript"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pilfflonk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
