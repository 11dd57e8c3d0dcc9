"""Scanner and parser for simple filter expressions."""

__version__ = "0.1.0"
__all__ = ["errors", "parser", "scanner", "tokens"]