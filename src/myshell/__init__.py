"""myshell - a small interactive shell."""

from .core import InputRouter, extract, route, tokenize

__version__ = "0.1.0"

__all__ = ["InputRouter", "extract", "route", "tokenize"]
