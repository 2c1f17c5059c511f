"""Elliptic-curve cryptographic primitives over the Ristretto group."""

__version__ = "0.1.0"