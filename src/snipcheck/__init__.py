"""Pattern-based review for pasted code snippets."""

__version__ = "0.3.0"
