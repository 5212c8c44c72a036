[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railwind"
version = "0.1.0"
description = "Generate utility-first CSS from the class names used in HTML and text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["css", "html", "utility-first", "stylesheet", "generator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
railwind = "railwind.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["railwind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
