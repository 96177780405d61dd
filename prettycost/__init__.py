"""Cost-based pretty printing with choice, flatten, align and nest combinators."""

__version__ = "0.1.0"
__all__ = ["document", "printer", "layouts", "sexpr", "benchmark", "cli"]