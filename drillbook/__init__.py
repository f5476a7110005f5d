"""Practice exercises in strings, numbers and data structures, plus two small web services."""

__version__ = "0.1.0"