[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golly"
version = "0.1.0"
description = "A command-line interface for managing and chatting with an Ollama server, with Markdown-rendered replies in the terminal."
requires-python = ">=3.10"
keywords = ["ollama", "llm", "chat", "cli", "terminal", "markdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "requests>=2.28",
    "pyyaml>=6.0",
    "python-dotenv>=1.0",
    "rich>=13.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
golly = "golly.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["golly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
