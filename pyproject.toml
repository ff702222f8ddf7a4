[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletcore"
version = "0.1.0"
description = "Wallet domain library: clients, accounts and balance transfers with a unit of work, SQL repositories and domain events"
requires-python = ">=3.10"
keywords = ["wallet", "accounting", "event-driven", "unit-of-work", "domain-events"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["walletcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
