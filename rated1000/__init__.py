"""Solvers for competitive-programming problems on arrays, strings and numbers, with a judge-input command."""

__version__ = "0.1.0"