[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bvernam"
version = "1.0.0"
description = "Block-shifted Vernam (XOR) cipher for files and byte strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["vernam", "xor", "cipher", "encryption"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
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

[project.scripts]
bvernam = "bvernam.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bvernam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
