[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "botplugins"
version = "1.5.0"
description = "A chat bot configuration command and a set of chat plugins: replies, games, lookups, drift bottles and Bilibili link cards"
requires-python = ">=3.10"
keywords = ["chatbot", "onebot", "plugins", "bilibili", "gacha", "drift-bottle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests>=2.28",
    "psutil>=5.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
botplugins = "botplugins.config:main"

[tool.hatch.build.targets.wheel]
packages = ["botplugins"]

[tool.hatch.build.targets.sdist]
include = ["botplugins", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
