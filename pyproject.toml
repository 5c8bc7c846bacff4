[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinicdesk"
version = "0.1.0"
description = "Front-desk console for a small clinic: doctors, appointments, billing and patient records."
requires-python = ">=3.10"
dependencies = []
keywords = ["clinic", "hospital", "appointments", "billing", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinicdesk = "clinicdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clinicdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
