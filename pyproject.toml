[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procsys"
version = "0.1.0"
description = "Collect Linux sysfs device and class information as Python dataclasses"
requires-python = ">=3.10"
dependencies = []
keywords = ["sysfs", "linux", "monitoring", "metrics", "hardware", "thermal", "sas", "nvme"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["procsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
