[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nistp256"
version = "0.1.0"
description = "Pure-Python field, group and ECDSA arithmetic for the NIST P-256 (secp256r1) elliptic curve"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "elliptic-curve",
    "ecdsa",
    "p256",
    "secp256r1",
    "prime256v1",
    "sec1",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["nistp256"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
