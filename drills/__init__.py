"""Classic algorithm drills: numbers, patterns, recursion, sorting, arrays, graphs and linked lists."""

__version__ = "0.1.0"