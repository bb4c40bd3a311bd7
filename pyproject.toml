[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palletchain"
version = "0.1.0"
description = "A minimal blockchain state machine built from pluggable pallets: system, balances and proof of existence."
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "state-machine", "runtime", "pallet", "dispatch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
palletchain = "palletchain.app:main"

[tool.hatch.build.targets.wheel]
packages = ["palletchain"]

[tool.pytest.ini_options]
addopts = "-ra"
