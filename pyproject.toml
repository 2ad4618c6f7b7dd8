[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadastroloja"
version = "0.1.0"
description = "Fixed-size binary record files for a small store: customers, suppliers, products, salespeople, invoices and price history"
requires-python = ">=3.10"
dependencies = []
keywords = ["store", "point-of-sale", "records", "binary-file", "inventory"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cadastroloja"]

[tool.pytest.ini_options]
addopts = "-ra"
