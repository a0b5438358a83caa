[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nachoskit"
version = "0.1.0"
description = "Tools for Nachos MIPS executables: COFF reading, NOFF and flat conversion, simulated memory, and small stack examples"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "nachos",
    "mips",
    "coff",
    "noff",
    "object-file",
    "stack",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coff2noff = "nachoskit.noff:main"
coff2flat = "nachoskit.flat:main"
nachoskit-stack = "nachoskit.stacks:main"
nachoskit-inheritstack = "nachoskit.inheritstack:main"

[tool.hatch.build.targets.wheel]
packages = ["nachoskit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
