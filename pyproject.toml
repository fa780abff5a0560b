[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portwatch"
version = "0.1.0"
description = "Find which processes listen on TCP ports and optionally stop them"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["ports", "tcp", "netstat", "lsof", "ss", "process", "kill"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: MacOS",
    "Operating System :: Microsoft :: Windows",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
portwatch = "portwatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["portwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
