[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cliquefind"
version = "0.1.0"
description = "Enumerate the maximal cliques of an undirected graph with three classic algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "clique",
    "maximal clique",
    "bron-kerbosch",
    "tomita",
    "chiba-nishizeki",
    "degeneracy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cliquefind-els = "cliquefind.els:main"
cliquefind-chiba = "cliquefind.chiba:main"
cliquefind-tomita = "cliquefind.tomita:main"

[tool.hatch.build.targets.wheel]
packages = ["cliquefind"]

[tool.pytest.ini_options]
addopts = "-ra"
