[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edref"
version = "2.0.1"
description = "Pure-Python reference implementations of Ed25519, X25519, SHA-512 and Salsa20"
requires-python = ">=3.10"
dependencies = []
keywords = ["ed25519", "curve25519", "x25519", "sha512", "salsa20", "signatures", "cryptography"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["edref"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
