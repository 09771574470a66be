"""DNA pattern counting with brute force and Karp-Rabin matchers."""

__version__ = "0.1.0"
