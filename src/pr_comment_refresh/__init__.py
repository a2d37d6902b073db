"""Refresh security-scan findings posted as pull request comments."""

__version__ = "0.1.0"
