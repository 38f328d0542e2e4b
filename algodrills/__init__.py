"""Classic programming exercises: patterns, frequency tables, records, recursion, sorting and arrays."""

__version__ = "0.1.0"
__all__ = ["arrays", "hashing", "patterns", "recursion", "sorting", "students"]