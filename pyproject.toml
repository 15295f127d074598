[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlab"
version = "0.1.0"
description = "A small teaching blockchain with proof-of-work mining, tamper detection and Merkle proofs"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "merkle-tree", "proof-of-work", "sha256", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainlab = "chainlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlab"]

[tool.pytest.ini_options]
addopts = "-ra"
