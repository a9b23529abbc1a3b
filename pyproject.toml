[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tddkit"
version = "0.1.0"
description = "Small, well-tested building blocks: multi-currency money, a word dictionary, a wallet, shapes, a countdown, a thread-safe counter, a website checker, a URL racer and a value walker."
requires-python = ">=3.10"
dependencies = []
keywords = ["tdd", "money", "currency", "dictionary", "wallet", "shapes", "countdown", "concurrency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Unit",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tddkit-greet = "tddkit.greetings:main"
tddkit-countdown = "tddkit.countdown:main"

[tool.hatch.build.targets.wheel]
packages = ["tddkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
