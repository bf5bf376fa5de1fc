"""High-precision arithmetic expression calculator with input validation and a command-line front end."""

__version__ = "0.1.0"