[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alita"
version = "2.1.3"
description = "Settings storage, translations and moderation helpers for a group-management chat bot"
requires-python = ">=3.10"
keywords = ["chat", "bot", "moderation", "group-management", "mongodb", "i18n"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Chat",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "pymongo",
    "pyyaml",
    "python-dotenv",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alita"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
