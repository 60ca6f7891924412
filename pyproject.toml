[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinychat"
version = "0.1.0"
description = "A minimal TCP chat room server and line-based terminal client"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "tcp", "asyncio", "chatroom", "broadcast"]
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
    "Framework :: AsyncIO",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
tinychat-server = "tinychat.server:main"
tinychat-client = "tinychat.client:main"

[tool.hatch.build.targets.wheel]
packages = ["tinychat"]

[tool.pytest.ini_options]
addopts = "-ra"
