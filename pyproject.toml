[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jeronibot"
version = "0.1.0"
description = "miniPRO drive packets, Linux joystick input, Bluetooth UUID and ATT helpers, and a fixed-rate loop timer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "robotics",
    "minipro",
    "joystick",
    "xbox360",
    "bluetooth",
    "att",
    "uuid",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jeronibot-joystick = "jeronibot.joystick:main"

[tool.hatch.build.targets.wheel]
packages = ["jeronibot"]

[tool.hatch.build.targets.sdist]
include = ["jeronibot", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
