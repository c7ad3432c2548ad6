"""Classic recursion, string, stack, expression and queue algorithms."""

__version__ = "0.1.0"
__all__ = ["recursion", "strings", "stack", "expressions", "linear_queue"]