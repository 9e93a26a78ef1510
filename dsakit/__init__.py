"""Classic data structures and algorithms: searching, sorting, matrices, bounded containers, linked lists and postfix conversion."""

__version__ = "0.1.0"

__all__ = ["bounded", "linked", "matrix", "postfix", "searching", "sorting"]