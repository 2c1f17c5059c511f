[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecprim"
version = "0.1.0"
description = "Elliptic-curve cryptographic primitives over Ristretto: commitments, sigma proofs, verifiable secret sharing and two-party protocols"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "ristretto",
    "elliptic-curve",
    "zero-knowledge",
    "sigma-protocol",
    "secret-sharing",
    "pedersen",
    "commitment",
    "merkle-tree",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ecprim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
