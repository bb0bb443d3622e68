[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daytime"
version = "0.1.0"
description = "A small TCP daytime protocol (port 13) client and server, with socket helper utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["daytime", "rfc867", "tcp", "sockets", "network"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
daytime-client = "daytime.client:main"
daytime-server = "daytime.server:main"

[tool.hatch.build.targets.wheel]
packages = ["daytime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
