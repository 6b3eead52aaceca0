[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "epinet"
version = "0.1.0"
description = "Toy simulations of epigenetic modification networks, CpG methylation states and chromatin signalling"
requires-python = ">=3.10"
dependencies = []
keywords = ["epigenetics", "methylation", "CpG", "chromatin", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
epinet = "epinet.cli:main"
epinet-cpg = "epinet.cpg:main"
epinet-chromatin = "epinet.chromatin:main"

[tool.hatch.build.targets.wheel]
packages = ["epinet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
