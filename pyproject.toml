[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nanoeda"
version = "0.1.0"
description = "Nanomaterial models and quantum defect simulation for electronic design"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphene", "carbon nanotube", "MoS2", "band gap", "defects", "semiconductor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nanoeda = "nanoeda.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nanoeda"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
