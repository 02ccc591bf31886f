"""Boilertowns contributor tooling: interactively add a new boilerplate."""

__version__ = "0.1.0"
