"""Bulma CSS markup built from Python functions, plus a stylesheet generator."""

__version__ = "0.1.0"