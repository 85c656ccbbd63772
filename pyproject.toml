[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmcwire"
version = "0.1.0"
description = "Wire formats for IPMI v1.5 and v2.0/RMCP+ session headers, RAKP messages, SDR headers and related codes."
requires-python = ">=3.10"
dependencies = []
keywords = ["ipmi", "bmc", "rmcp", "rakp", "sdr", "out-of-band", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bmcwire"]

[tool.pytest.ini_options]
addopts = "-ra"
