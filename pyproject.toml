[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printtui"
version = "0.1.0"
description = "Terminal interface for listing, adding and removing CUPS printers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cups", "printer", "tui", "curses", "lpadmin", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: System Administrators",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Printing",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
printtui = "printtui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["printtui"]

[tool.pytest.ini_options]
addopts = "-ra"
