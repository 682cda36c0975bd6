[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aegisbot"
version = "0.1.0"
description = "Command lexing, moderation log text and timeout scheduling for a chat moderation bot"
requires-python = ">=3.11"
dependencies = []
keywords = ["moderation", "chat", "bot", "audit-log", "lexer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aegisbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
