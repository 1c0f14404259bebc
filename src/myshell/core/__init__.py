"""Core module for myshell."""

from .lexer import tokenize
from .output import route
from .redirection import extract
from .resolver import resolve, search_path_from_env
from .router import InputRouter

__all__ = ["InputRouter", "extract", "resolve", "route", "search_path_from_env", "tokenize"]
