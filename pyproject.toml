[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "payroll"
version = "0.1.0"
description = "A small payroll system: employees, pay classifications, schedules, payment methods, union affiliations and transactions."
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "accounting", "employees", "paycheck", "transactions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
payroll = "payroll.application:main"

[tool.hatch.build.targets.wheel]
packages = ["payroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
