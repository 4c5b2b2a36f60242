"""Two-stack integer sorting with a restricted operation set, plus a checker."""

__version__ = "0.1.0"