[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotreload"
version = "1.0.0"
description = "Watch a source directory, rebuild on change and restart the target program"
requires-python = ">=3.10"
dependencies = []
keywords = ["hot-reload", "watch", "rebuild", "development", "build"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hot-reload = "hotreload.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hotreload"]

[tool.pytest.ini_options]
addopts = "-ra"
