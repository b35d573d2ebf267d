[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlpp"
version = "0.1.0"
description = "Activation functions, image convolutions and small machine-learning models built on NumPy"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "machine learning",
    "activation functions",
    "convolution",
    "harris corner detection",
    "naive bayes",
    "autoencoder",
    "regression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mlpp"]

[tool.pytest.ini_options]
addopts = "-ra"
