[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plainpad"
version = "0.1.0"
description = "A small plain-text notepad with case transforms, find and replace, word frequencies and spell checking."
requires-python = ">=3.10"
dependencies = []
keywords = ["notepad", "editor", "text", "spell-checker", "word-frequency", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plainpad = "plainpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["plainpad"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
