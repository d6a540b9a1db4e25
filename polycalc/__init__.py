"""Exact sparse multivariate polynomial engine and stack calculator."""

__version__ = "0.1.0"
