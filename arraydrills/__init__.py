"""Classic array and sorting exercises with a small growable vector."""

__version__ = "0.1.0"