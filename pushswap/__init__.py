"""Sort integers with two stacks and a limited set of moves."""

__version__ = "1.0.0"