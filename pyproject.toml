[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigmoidnet"
version = "0.1.0"
description = "A small dense neural network with sigmoid layers, trained by gradient descent on CSV data"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "sigmoid", "backpropagation", "gradient descent", "xavier initialisation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sigmoidnet = "sigmoidnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sigmoidnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
