[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infixcalc"
version = "0.1.0"
description = "A small four-function calculator that evaluates infix expressions with parentheses"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "infix", "postfix", "shunting-yard", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
infixcalc = "infixcalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["infixcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
