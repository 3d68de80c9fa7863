"""Classic data structures and algorithms: bounded stacks and queues, expressions, recursion and binary trees."""

__version__ = "0.1.0"
__all__ = ["errors", "queues", "stacks", "expressions", "recursion", "trees", "threaded"]