"""Activation functions, hyperbolic functions, image convolutions and small models."""

__version__ = "0.1.0"

__all__ = [
    "activation",
    "autoencoder",
    "bernoulli_nb",
    "cloglog_reg",
    "convolutions",
    "hyperbolic",
]