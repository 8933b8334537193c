[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopstore"
version = "0.1.0"
description = "A small shop back end: SQLite product catalogue, accounts, cart, orders, favourites and addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "store", "cart", "catalogue", "orders", "sqlite"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shopstore = "shopstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shopstore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
